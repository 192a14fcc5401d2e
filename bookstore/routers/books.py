import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from bookstore.dependencies import get_store
from bookstore.schemas.book import BookPayload, BookResponse
from bookstore.store import BookStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])


async def read_payload(request: Request) -> BookPayload:
    """Decode a book from the request body.

    Fields of the wrong type are zeroed by the schema; only a body that is not
    a JSON object falls back to an empty payload.
    """
    body = await request.body()
    try:
        return BookPayload.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Ignoring malformed book payload on %s %s: %s", request.method, request.url.path, e)
        return BookPayload()


@router.get("", response_model=list[BookResponse])
async def list_books(store: BookStore = Depends(get_store)):
    return store.list()


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(book_id: str, store: BookStore = Depends(get_store)):
    return store.get(book_id)


@router.post("", response_model=BookResponse)
async def create_book(
    data: BookPayload = Depends(read_payload),
    store: BookStore = Depends(get_store),
):
    return store.create(data.to_book())


@router.put("/{book_id}", response_model=BookResponse | list[BookResponse])
async def replace_book(
    book_id: str,
    data: BookPayload = Depends(read_payload),
    store: BookStore = Depends(get_store),
):
    result = store.replace(book_id, data.to_book())
    if not result.found:
        # Unknown id: answer with the unchanged collection.
        return result.books
    return result.book


@router.delete("/{book_id}", response_model=list[BookResponse])
async def delete_book(book_id: str, store: BookStore = Depends(get_store)):
    return store.delete(book_id)
