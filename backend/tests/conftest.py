"""
Pytest fixtures for backend testing.
Provides in-memory renderers, render contexts, and a test client.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from barcode_studio.core.config import get_settings
from barcode_studio.main import create_application
from barcode_studio.modules.barcodes.router import get_render_context
from barcode_studio.renderers.context import RenderContext
from tests.fakes import FakeDataMatrixRenderer, FakeQRRenderer, FakeRasterRenderer


@pytest.fixture(autouse=True)
def reset_settings_cache() -> None:
    """Settings are cached; drop them so monkeypatched env vars take effect."""
    get_settings.cache_clear()


@pytest.fixture
def qr_renderer() -> FakeQRRenderer:
    return FakeQRRenderer()


@pytest.fixture
def raster_renderer() -> FakeRasterRenderer:
    return FakeRasterRenderer()


@pytest.fixture
def datamatrix_renderer() -> FakeDataMatrixRenderer:
    return FakeDataMatrixRenderer()


@pytest.fixture
def render_context(
    qr_renderer: FakeQRRenderer,
    raster_renderer: FakeRasterRenderer,
    datamatrix_renderer: FakeDataMatrixRenderer,
) -> RenderContext:
    return RenderContext(
        qr=qr_renderer,
        raster=raster_renderer,
        datamatrix=datamatrix_renderer,
    )


@pytest_asyncio.fixture
async def client(render_context: RenderContext) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the full application with in-memory renderers."""
    app = create_application()
    app.dependency_overrides[get_render_context] = lambda: render_context

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
