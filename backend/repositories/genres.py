"""
Genre repository backed by SQLAlchemy/SQLite.
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from domain.models import Genre
from repositories.models import GenreORM


def _genre_from_orm(orm: GenreORM) -> Genre:
    return Genre(id=orm.id, name=orm.name)


class GenresRepository:
    """CRUD operations for genres."""

    def list_genres(self, session: Session) -> List[Genre]:
        genres = session.query(GenreORM).order_by(GenreORM.name.asc()).all()
        return [_genre_from_orm(g) for g in genres]

    def get_genre(self, session: Session, genre_id: str) -> Optional[Genre]:
        orm = session.get(GenreORM, genre_id)
        return _genre_from_orm(orm) if orm else None

    def find_by_name(self, session: Session, name: str) -> Optional[Genre]:
        orm = session.query(GenreORM).filter(GenreORM.name == name).first()
        return _genre_from_orm(orm) if orm else None

    def create_genre(self, session: Session, genre: Genre) -> Genre:
        orm = GenreORM(id=genre.id, name=genre.name)
        session.add(orm)
        session.commit()
        session.refresh(orm)
        return _genre_from_orm(orm)

    def update_genre(self, session: Session, genre: Genre) -> Optional[Genre]:
        orm = session.get(GenreORM, genre.id)
        if not orm:
            return None
        orm.name = genre.name
        session.add(orm)
        session.commit()
        session.refresh(orm)
        return _genre_from_orm(orm)

    def delete_genre(self, session: Session, genre_id: str) -> None:
        orm = session.get(GenreORM, genre_id)
        if orm:
            session.delete(orm)
            session.commit()
