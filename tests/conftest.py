import pytest
from fastapi.testclient import TestClient

from dealership.core.config import Settings
from dealership.crud.car_crud import CarRepository
from dealership.crud.client_crud import ClientRepository
from dealership.crud.sales_order_crud import SalesOrderRepository
from dealership.db.database import DatabaseGateway
from dealership.main import create_app


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'revenda.db'}"


@pytest.fixture
async def gateway(database_url):
    """Gateway abierto sobre una base SQLite temporal con el esquema creado."""
    gateway = DatabaseGateway(database_url)
    await gateway.open()
    await gateway.create_schema()
    yield gateway
    await gateway.close()


@pytest.fixture
def car_repository(gateway):
    return CarRepository(gateway)


@pytest.fixture
def client_repository(gateway):
    return ClientRepository(gateway)


@pytest.fixture
def sales_order_repository(gateway):
    return SalesOrderRepository(gateway)


@pytest.fixture
def api_client(database_url):
    settings = Settings(SQLALCHEMY_DATABASE_URI=database_url, DB_CREATE_SCHEMA=True)
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
