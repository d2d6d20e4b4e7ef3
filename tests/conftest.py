import pytest
from fastapi.testclient import TestClient

from recipe_card.app.main import create_app
from recipe_card.app.services.url_parsing.document import ParsedDocument


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def make_document():
    def _make(html: str) -> ParsedDocument:
        return ParsedDocument.from_html(html)

    return _make


@pytest.fixture
def json_ld_page():
    def _page(*blocks: str, body: str = "") -> str:
        scripts = "\n".join(
            f'<script type="application/ld+json">{block}</script>' for block in blocks
        )
        return f"<html><head>{scripts}</head><body>{body}</body></html>"

    return _page
