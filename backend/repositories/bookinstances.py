"""
Book instance repository backed by SQLAlchemy/SQLite.

Reads populate the referenced Book so callers get the whole aggregate.
"""
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload

from domain.errors import NotFoundError
from domain.models import Book, BookInstance
from repositories.models import BookInstanceORM


def _instance_from_orm(orm: BookInstanceORM, populate: bool = True) -> BookInstance:
    book = None
    if populate and orm.book is not None:
        book = Book(id=orm.book.id, title=orm.book.title, summary=orm.book.summary, isbn=orm.book.isbn)
    return BookInstance(
        id=orm.id,
        book_id=orm.book_id,
        imprint=orm.imprint,
        status=orm.status,
        due_back=orm.due_back,
        book=book,
    )


def _apply(orm: BookInstanceORM, instance: BookInstance) -> None:
    orm.book_id = instance.book_id
    orm.imprint = instance.imprint
    orm.status = instance.status
    orm.due_back = instance.due_back


class BookInstancesRepository:
    """CRUD operations for book instances."""

    def list_instances(self, session: Session) -> List[BookInstance]:
        rows = (
            session.query(BookInstanceORM)
            .options(joinedload(BookInstanceORM.book))
            .all()
        )
        return [_instance_from_orm(r) for r in rows]

    def get_instance(self, session: Session, instance_id: str) -> Optional[BookInstance]:
        """
        Load a copy with its Book populated.

        Returns None when the copy does not exist; raises NotFoundError when
        the copy exists but its Book is gone.
        """
        orm = (
            session.query(BookInstanceORM)
            .options(joinedload(BookInstanceORM.book))
            .filter(BookInstanceORM.id == instance_id)
            .first()
        )
        if not orm:
            return None
        if orm.book is None:
            raise NotFoundError("Book not found")
        return _instance_from_orm(orm)

    def create_instance(self, session: Session, instance: BookInstance) -> BookInstance:
        orm = BookInstanceORM(id=instance.id)
        _apply(orm, instance)
        session.add(orm)
        session.commit()
        session.refresh(orm)
        return _instance_from_orm(orm, populate=False)

    def update_instance(self, session: Session, instance: BookInstance) -> Optional[BookInstance]:
        orm = session.get(BookInstanceORM, instance.id)
        if not orm:
            return None
        _apply(orm, instance)
        session.add(orm)
        session.commit()
        session.refresh(orm)
        return _instance_from_orm(orm, populate=False)

    def delete_instance(self, session: Session, instance_id: str) -> None:
        # Missing ids are ignored.
        session.query(BookInstanceORM).filter(BookInstanceORM.id == instance_id).delete()
        session.commit()
