"""
SQLAlchemy ORM models for persistence.
"""
from sqlalchemy import Column, Date, ForeignKey, String, Table, Text
from sqlalchemy.orm import relationship

from db import Base


book_genres = Table(
    "book_genres",
    Base.metadata,
    Column("book_id", String, ForeignKey("books.id", ondelete="CASCADE"), primary_key=True),
    Column("genre_id", String, ForeignKey("genres.id"), primary_key=True, index=True),
)


class GenreORM(Base):
    __tablename__ = "genres"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)

    books = relationship("BookORM", secondary=book_genres, back_populates="genres")


class BookORM(Base):
    __tablename__ = "books"

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    summary = Column(Text, nullable=True)
    isbn = Column(String, nullable=True)

    genres = relationship("GenreORM", secondary=book_genres, back_populates="books")
    instances = relationship("BookInstanceORM", back_populates="book")


class BookInstanceORM(Base):
    __tablename__ = "book_instances"

    id = Column(String, primary_key=True, index=True)
    book_id = Column(String, ForeignKey("books.id"), nullable=False, index=True)
    imprint = Column(String, nullable=False)
    status = Column(String, nullable=False)
    due_back = Column(Date, nullable=True)

    book = relationship("BookORM", back_populates="instances")
