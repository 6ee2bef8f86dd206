"""Pytest fixtures for the UI generation backend."""

from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
import requests

from uigen.core.llm_client import GenerationClient
from uigen.utils.config import Settings


def make_response(status_code: int = 200, payload: Any = None, json_error: bool = False) -> MagicMock:
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 400
    if json_error:
        resp.json.side_effect = ValueError("Expecting value")
    else:
        resp.json.return_value = payload
    return resp


def gemini_payload(text: Optional[str]) -> Dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class FakeSession:
    """Records post() calls and replays a canned response or exception."""

    def __init__(self, response: Any = None, exc: Optional[Exception] = None):
        self.response = response
        self.exc = exc
        self.calls: List[Dict[str, Any]] = []

    def post(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    return tmp_path / "project"


@pytest.fixture
def offline_settings(project_root: Path, tmp_path: Path) -> Settings:
    """Settings with no API key configured."""
    return Settings(api_key=None, project_root=project_root, log_dir=str(tmp_path / "logs"))


def make_client(session: FakeSession, api_key: Optional[str] = "test-key", **kwargs) -> GenerationClient:
    return GenerationClient(api_key=api_key, session=session, **kwargs)
