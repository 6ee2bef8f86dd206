"""Tests for the FastAPI routes."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from uigen.api.generate import get_generator
from uigen.core.generator import UIGenerator
from uigen.main import app
from uigen.utils.config import Settings
from uigen.utils.file_helpers import _safe_normalize, resolve_under_root


@pytest.fixture
def api(offline_settings: Settings):
    gen = UIGenerator(settings=offline_settings)
    app.dependency_overrides[get_generator] = lambda: gen
    try:
        yield TestClient(app), gen
    finally:
        app.dependency_overrides.clear()


class TestGenerateRoute:
    def test_generate_and_validate(self, api) -> None:
        client, gen = api
        resp = client.post("/generate/ui", json={"app_idea": "issue tracker", "validate": True})
        assert resp.status_code == 200
        body = resp.json()
        assert body["path"] == str(gen.output_path)
        assert body["source"] == "fallback"
        assert body["reason"] == "no_api_key"
        assert body["validation"]["passed"] is True

    def test_rejects_unknown_theme(self, api) -> None:
        client, _ = api
        resp = client.post("/generate/ui", json={"app_idea": "x", "theme": "neon"})
        assert resp.status_code == 422

    def test_write_failure_is_500(self, api, project_root: Path) -> None:
        client, _ = api
        project_root.mkdir(parents=True)
        (project_root / "app").write_text("blocking file", encoding="utf-8")
        resp = client.post("/generate/ui", json={"app_idea": "x"})
        assert resp.status_code == 500


class TestValidateRoute:
    def test_default_path_before_generation(self, api) -> None:
        client, _ = api
        resp = client.post("/generate/validate", json={})
        assert resp.status_code == 200
        assert resp.json()["passed"] is False

    def test_relative_path(self, api) -> None:
        client, _ = api
        client.post("/generate/ui", json={"app_idea": "x"})
        resp = client.post("/generate/validate", json={"path": "app/GeneratedUI.tsx"})
        assert resp.json()["passed"] is True
        assert resp.json()["missing"] == []

    @pytest.mark.parametrize("bad", ["../etc/passwd", "/etc/passwd", "  "])
    def test_traversal_rejected(self, api, bad) -> None:
        client, _ = api
        resp = client.post("/generate/validate", json={"path": bad})
        assert resp.status_code == 400


class TestFileHelpers:
    def test_safe_normalize(self) -> None:
        assert _safe_normalize("app/./GeneratedUI.tsx") == "app/GeneratedUI.tsx"
        assert _safe_normalize("app\\GeneratedUI.tsx") == "app/GeneratedUI.tsx"
        assert _safe_normalize("app/../../x") is None
        assert _safe_normalize("") is None

    def test_resolve_under_root(self, tmp_path: Path) -> None:
        assert resolve_under_root(tmp_path, "app/x.tsx") == tmp_path.resolve() / "app" / "x.tsx"
        assert resolve_under_root(tmp_path, "../x") is None
