"""
Run FastAPI HTTP Server

Starts the FastAPI server for resume tailoring.
"""

import uvicorn

from app.config import get_config
from app.utils.logger import get_logger, setup_logging

if __name__ == "__main__":
    config = get_config()
    setup_logging(config)
    logger = get_logger("backend_server")

    # PORT (set by most hosting platforms) is already folded into config.server.port
    logger.info(f"Server is running on http://localhost:{config.server.port}")

    uvicorn.run(
        "app.main:app",
        host=config.server.host,
        port=config.server.port,
        reload=False,  # Disable reload for production
        log_level=config.LOG_LEVEL.lower(),
    )
