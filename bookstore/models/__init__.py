from bookstore.models.book import Author, Book

__all__ = ["Author", "Book"]
