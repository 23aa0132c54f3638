from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.base import BaseRepository
from catalog.repositories.book_repository import BookRepository

__all__ = ["AuthorRepository", "BaseRepository", "BookRepository"]
