from fastapi import FastAPI

from bookstore.routers import books
from bookstore.store import BookStore


def create_app(store: BookStore | None = None) -> FastAPI:
    app = FastAPI(title="Bookstore", version="0.1.0")
    app.state.store = store if store is not None else BookStore.seeded()
    app.include_router(books.router)
    return app


app = create_app()
