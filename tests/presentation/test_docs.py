"""Tests for API documentation routes."""

from pathlib import Path
from unittest.mock import AsyncMock

from aiohttp import test_utils

from userlookup.presentation import AdmissionPolicy, create_app
from userlookup.presentation.docs import load_openapi_document

ALLOWED = {"Host": "localhost:3000"}


class TestLoadOpenapiDocument:
    """load_openapi_document tests."""

    def test_bundled_document(self) -> None:
        """Test that the bundled document describes the user endpoint."""
        document = load_openapi_document()

        assert document is not None
        assert document["openapi"].startswith("3.")
        assert "/users/{id}" in document["paths"]
        assert "/graphql" in document["paths"]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file gives None."""
        assert load_openapi_document(tmp_path / "missing.yaml") is None

    def test_broken_yaml(self, tmp_path: Path) -> None:
        """Test that invalid YAML gives None."""
        path = tmp_path / "openapi.yaml"
        path.write_text("paths: [unclosed\n")

        assert load_openapi_document(path) is None

    def test_non_mapping(self, tmp_path: Path) -> None:
        """Test that a document that is not a mapping gives None."""
        path = tmp_path / "openapi.yaml"
        path.write_text("- a\n- b\n")

        assert load_openapi_document(path) is None


class TestDocsRoutes:
    """Documentation route tests."""

    async def test_docs_served(self, admission_policy: AdmissionPolicy) -> None:
        """Test that the UI page and JSON document are served."""
        app = create_app(
            user_service=AsyncMock(),
            admission_policy=admission_policy,
            openapi_document={"openapi": "3.0.3", "paths": {}},
        )

        async with test_utils.TestClient(test_utils.TestServer(app)) as client:
            page = await client.get("/api-docs", headers=ALLOWED)
            assert page.status == 200
            assert page.content_type == "text/html"
            assert "/api-docs/openapi.json" in await page.text()

            document = await client.get("/api-docs/openapi.json", headers=ALLOWED)
            assert document.status == 200
            assert await document.json() == {"openapi": "3.0.3", "paths": {}}

    async def test_docs_absent_without_document(
        self, client: test_utils.TestClient
    ) -> None:
        """Test that docs routes are skipped when no document is loaded."""
        resp = await client.get("/api-docs", headers=ALLOWED)

        assert resp.status == 404
