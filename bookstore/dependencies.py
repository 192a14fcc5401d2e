from fastapi import Request

from bookstore.store import BookStore


def get_store(request: Request) -> BookStore:
    return request.app.state.store
