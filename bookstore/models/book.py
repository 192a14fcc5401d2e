from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Author:
    first_name: str = ""
    last_name: str = ""


@dataclass(frozen=True)
class Book:
    id: str = ""
    title: str = ""
    author: Author | None = None

    def with_id(self, book_id: str) -> "Book":
        return replace(self, id=book_id)
