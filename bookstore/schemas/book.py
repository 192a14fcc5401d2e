from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from bookstore.models import Author, Book


class AuthorSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")

    @field_validator("first_name", "last_name", mode="wrap")
    @classmethod
    def _zero_invalid_name(cls, value, handler):
        try:
            return handler(value)
        except ValidationError:
            return ""


class BookPayload(BaseModel):
    """Body of create and replace requests.

    Any ``id`` sent by the client is dropped. A field that is null or of the
    wrong type is left zero-valued while the remaining fields are kept.
    """

    title: str = ""
    author: AuthorSchema | None = None

    @field_validator("title", mode="wrap")
    @classmethod
    def _zero_invalid_title(cls, value, handler):
        try:
            return handler(value)
        except ValidationError:
            return ""

    @field_validator("author", mode="wrap")
    @classmethod
    def _drop_invalid_author(cls, value, handler):
        try:
            return handler(value)
        except ValidationError:
            return None

    def to_book(self) -> Book:
        author = None
        if self.author is not None:
            author = Author(first_name=self.author.first_name, last_name=self.author.last_name)
        return Book(title=self.title, author=author)


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    author: AuthorSchema | None
