"""
Application entrypoint.

Configures logging and builds the FastAPI `app` instance served by uvicorn.
"""

from app.api.main import create_app
from app.utils.logger import setup_logging
from app.config import get_config

config = get_config()
setup_logging(config)

app = create_app(config)
