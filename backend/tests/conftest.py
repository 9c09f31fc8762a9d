import sys
from pathlib import Path

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from db import init_db, make_engine  # noqa: E402
from domain.models import Book, Genre  # noqa: E402
from repositories import BooksRepository, GenresRepository  # noqa: E402


@pytest.fixture
def session_factory(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
    init_db(bind=engine)
    factory = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    yield factory
    engine.dispose()


@pytest.fixture
def add_genre(session_factory):
    def _add(name: str) -> Genre:
        with session_factory() as session:
            return GenresRepository().create_genre(session, Genre(id=Genre.generate_id(), name=name))

    return _add


@pytest.fixture
def add_book(session_factory):
    def _add(title: str, genre_ids=None) -> Book:
        book = Book(id=Book.generate_id(), title=title, genre_ids=list(genre_ids or []))
        with session_factory() as session:
            return BooksRepository().create_book(session, book)

    return _add


class UnavailableBooksRepository(BooksRepository):
    """Books lookups fail as if the database went away."""

    def list_by_genre(self, session, genre_id):
        raise OperationalError("SELECT books", {}, Exception("database is locked"))


@pytest.fixture
def unavailable_books_repo():
    return UnavailableBooksRepository()
