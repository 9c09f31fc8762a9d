"""
Book repository backed by SQLAlchemy/SQLite.

Books are read-only for the catalog controllers; create_book exists so
titles can be loaded into an empty database.
"""
from typing import List
from sqlalchemy.orm import Session, selectinload

from domain.models import Book
from repositories.models import BookORM, GenreORM


def _book_from_orm(orm: BookORM) -> Book:
    return Book(
        id=orm.id,
        title=orm.title,
        summary=orm.summary,
        isbn=orm.isbn,
        genre_ids=[g.id for g in orm.genres],
    )


class BooksRepository:
    """Read operations for books, plus inserts for seeding."""

    def list_titles(self, session: Session) -> List[Book]:
        """Id and title only, for selection controls."""
        rows = session.query(BookORM.id, BookORM.title).order_by(BookORM.title.asc()).all()
        return [Book(id=row.id, title=row.title) for row in rows]

    def list_by_genre(self, session: Session, genre_id: str) -> List[Book]:
        books = (
            session.query(BookORM)
            .options(selectinload(BookORM.genres))
            .filter(BookORM.genres.any(GenreORM.id == genre_id))
            .order_by(BookORM.title.asc())
            .all()
        )
        return [_book_from_orm(b) for b in books]

    def create_book(self, session: Session, book: Book) -> Book:
        orm = BookORM(
            id=book.id,
            title=book.title,
            summary=book.summary,
            isbn=book.isbn,
        )
        if book.genre_ids:
            orm.genres = (
                session.query(GenreORM).filter(GenreORM.id.in_(book.genre_ids)).all()
            )
        session.add(orm)
        session.commit()
        session.refresh(orm)
        return _book_from_orm(orm)
