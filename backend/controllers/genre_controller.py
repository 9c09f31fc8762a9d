"""
Genre Controller

Handles listing, showing, creating, updating and deleting genres.
"""
import logging
from typing import Any, Mapping, Union

from sqlalchemy.orm import sessionmaker

from domain.errors import NotFoundError
from domain.models import CATALOG_PREFIX, Genre
from domain.validation import validate_genre
from repositories import BooksRepository, GenresRepository

from .base import BaseController, Redirect, Render

logger = logging.getLogger(__name__)

GENRE_LIST_URL = f"{CATALOG_PREFIX}/genres"

ViewResult = Union[Render, Redirect]


class GenreController(BaseController):
    """Controller for genre pages."""

    def __init__(
        self,
        session_factory: sessionmaker,
        genres_repo: GenresRepository | None = None,
        books_repo: BooksRepository | None = None,
    ):
        super().__init__(session_factory)
        self.genres_repo = genres_repo or GenresRepository()
        self.books_repo = books_repo or BooksRepository()

    async def _genre_with_books(self, genre_id: str):
        return await self.run_both(
            (self.genres_repo.get_genre, genre_id),
            (self.books_repo.list_by_genre, genre_id),
        )

    async def list(self) -> Render:
        genres = await self.run(self.genres_repo.list_genres)
        return Render("genre_list.html", {"title": "Genre List", "genre_list": genres})

    async def detail(self, genre_id: str) -> Render:
        genre, books = await self._genre_with_books(genre_id)
        if genre is None:
            raise NotFoundError("Genre not found")
        return Render(
            "genre_detail.html",
            {"title": "Genre Detail", "genre": genre, "genre_books": books},
        )

    async def create_form(self) -> Render:
        return Render("genre_form.html", {"title": "Create Genre"})

    async def create(self, form: Mapping[str, Any]) -> ViewResult:
        """
        Create a genre from submitted form data.

        Invalid input re-renders the form. A genre that already carries the
        submitted name is reused instead of creating a duplicate.
        """
        result = validate_genre(form)
        genre = Genre(id=Genre.generate_id(), name=result.values["name"])

        if not result.is_valid:
            return Render(
                "genre_form.html",
                {"title": "Create Genre", "genre": genre, "errors": result.errors},
            )

        existing = await self.run(self.genres_repo.find_by_name, genre.name)
        if existing:
            return Redirect(existing.url)

        saved = await self.run(self.genres_repo.create_genre, genre)
        logger.info("Created genre %s (%s)", saved.id, saved.name)
        return Redirect(saved.url)

    async def delete_form(self, genre_id: str) -> ViewResult:
        genre, books = await self._genre_with_books(genre_id)
        if genre is None:
            return Redirect(GENRE_LIST_URL, status_code=302)
        return Render(
            "genre_delete.html",
            {"title": "Delete Genre", "genre": genre, "genre_books": books},
        )

    async def delete(self, genre_id: str) -> ViewResult:
        # Re-check references here; the confirmation page may be stale.
        genre, books = await self._genre_with_books(genre_id)
        if books:
            logger.warning(
                "Refusing to delete genre %s: %d book(s) still reference it", genre_id, len(books)
            )
            return Render(
                "genre_delete.html",
                {"title": "Delete Genre", "genre": genre, "genre_books": books},
            )

        await self.run(self.genres_repo.delete_genre, genre_id)
        logger.info("Deleted genre %s", genre_id)
        return Redirect(GENRE_LIST_URL)

    async def update_form(self, genre_id: str) -> Render:
        genre = await self.run(self.genres_repo.get_genre, genre_id)
        if genre is None:
            raise NotFoundError("Genre not found")
        return Render("genre_form.html", {"title": "Update Genre", "genre": genre})

    async def update(self, genre_id: str, form: Mapping[str, Any]) -> ViewResult:
        result = validate_genre(form)
        genre = Genre(id=genre_id, name=result.values["name"])

        if not result.is_valid:
            return Render(
                "genre_form.html",
                {"title": "Update Genre", "genre": genre, "errors": result.errors},
            )

        updated = await self.run(self.genres_repo.update_genre, genre)
        if updated is None:
            raise NotFoundError("Genre not found")
        logger.info("Updated genre %s", updated.id)
        return Redirect(updated.url)
