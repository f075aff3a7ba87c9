"""
Configuración de pytest para tests
"""
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db import get_session, init_db
from app.main import app

# Deshabilitar rate limiting en la app antes de los tests
@pytest.fixture(autouse=True)
def disable_rate_limiting():
    """Deshabilita rate limiting para todos los tests"""
    previous = app.state.limiter
    app.state.limiter = None
    yield
    app.state.limiter = previous

@pytest.fixture
async def engine():
    """SQLite en memoria; StaticPool para compartir una única conexión"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    yield engine
    await engine.dispose()

@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

@pytest.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s

@pytest.fixture
async def client(session_factory):
    """Cliente HTTP contra la app, con la base de datos de test"""
    async def override_get_session():
        async with session_factory() as s:
            yield s

    app.dependency_overrides[get_session] = override_get_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

@pytest.fixture
def golden_retriever():
    """Datos de animal de prueba"""
    return {
        "species": "DOG",
        "breed": "Golden Retriever",
        "sex": "MALE",
        "approximateAge": 3,
        "size": "LARGE",
        "imageUrl": "http://url.com/golden.jpg",
    }
