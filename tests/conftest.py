import pytest
from httpx import ASGITransport, AsyncClient

from bookstore.app import create_app
from bookstore.store import BookStore


@pytest.fixture
def store():
    return BookStore.seeded()


@pytest.fixture
async def client(store):
    app = create_app(store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
