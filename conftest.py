import json
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.main import create_app
from app.config import Config, OpenAIConfig, UploadConfig


TAILORED_TEXT = "Summary\nBackend engineer focused on API design.\n\nExperience\n- Built APIs"


def completion_response(content=TAILORED_TEXT, status_code=200):
    return httpx.Response(
        status_code,
        json={
            "id": "chatcmpl-test",
            "model": "gpt-4o-mini",
            "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
            "usage": {"total_tokens": 42},
        },
    )


def build_pdf(pages):
    """Minimal PDF with one Helvetica text line per item, items stacked down each page."""
    objects = {
        1: b"<< /Type /Catalog /Pages 2 0 R >>",
        3: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    }
    kids = []
    for i, lines in enumerate(pages):
        page_num, content_num = 4 + 2 * i, 5 + 2 * i
        ops = ["BT", "/F1 12 Tf", "72 720 Td"]
        for j, line in enumerate(lines):
            if j:
                ops.append("0 -24 Td")
            ops.append(f"({line}) Tj")
        ops.append("ET")
        stream = "\n".join(ops).encode("latin-1")
        objects[content_num] = (
            f"<< /Length {len(stream)} >>\nstream\n".encode() + stream + b"\nendstream"
        )
        objects[page_num] = (
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 3 0 R >> >> /Contents {content_num} 0 R >>"
        ).encode()
        kids.append(f"{page_num} 0 R")
    objects[2] = f"<< /Type /Pages /Kids [{' '.join(kids)}] /Count {len(pages)} >>".encode()

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for num in range(1, len(objects) + 1):
        offsets.append(len(out))
        out += f"{num} 0 obj\n".encode() + objects[num] + b"\nendobj\n"
    xref_pos = len(out)
    out += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode()
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_pos}\n%%EOF\n"
    ).encode()
    return bytes(out)


class CompletionStub:
    """Records chat-completion requests and answers them with `handler`."""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: completion_response()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def payloads(self):
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def upload_dir(tmp_path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def config(upload_dir) -> Config:
    return Config(
        openai=OpenAIConfig(api_key="sk-test", base_url="https://llm.test/v1"),
        upload=UploadConfig(upload_dir=upload_dir),
    )


@pytest.fixture
def completion_stub() -> CompletionStub:
    return CompletionStub()


@pytest.fixture
def transport(completion_stub) -> httpx.MockTransport:
    return httpx.MockTransport(completion_stub)


@pytest.fixture
def client(config, transport):
    app = create_app(config, completion_transport=transport)
    with TestClient(app) as c:
        yield c
