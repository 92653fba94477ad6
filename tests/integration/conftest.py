import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.fake_engine import EngineRecorder
from tests.fixtures.json_loader import TestDataLoader
from src.app.services.document_exporter import DocumentExporter
from src.depends import get_document_exporter, get_session
import src.domain  # noqa: F401  registers tables on SQLModel.metadata


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create a throwaway SQLite database for each test"""
    test_db_url = f"sqlite+aiosqlite:///{tmp_path / 'invoices_test.db'}"

    engine = create_async_engine(test_db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def engines():
    """Fake rendering engines handed to the exporter"""
    return EngineRecorder()


def build_app(config, db_session, engines):
    """App wired to the test session and fake rendering engines"""
    from src.api.app import create_app

    app = create_app(config)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_document_exporter] = lambda: DocumentExporter(
        engine_factory=engines, timeout=5
    )
    return app


@pytest_asyncio.fixture
async def client(db_session, engines):
    """Create test client with database session and exporter overrides"""
    from config import ApplicationConfig

    app = build_app(ApplicationConfig, db_session, engines)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def production_client(db_session, engines):
    """Test client for an app configured with ENVIRONMENT=production"""
    from config import ApplicationConfig

    class ProductionConfig(ApplicationConfig):
        ENVIRONMENT = "production"

    app = build_app(ProductionConfig, db_session, engines)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
