"""
Book Instance Controller

Handles the pages for physical copies of books.
"""
import logging
from datetime import date
from typing import Any, Mapping, Union

from sqlalchemy.orm import sessionmaker

from domain.errors import NotFoundError
from domain.models import CATALOG_PREFIX, BookInstance, BookInstanceStatus
from domain.validation import ValidationResult, validate_bookinstance
from repositories import BookInstancesRepository, BooksRepository

from .base import BaseController, Redirect, Render

logger = logging.getLogger(__name__)

BOOKINSTANCE_LIST_URL = f"{CATALOG_PREFIX}/bookinstances"

ViewResult = Union[Render, Redirect]


def _instance_from_form(instance_id: str, result: ValidationResult) -> BookInstance:
    values = result.values
    due_back = values.get("due_back")
    return BookInstance(
        id=instance_id,
        book_id=values.get("book") or "",
        imprint=values.get("imprint") or "",
        status=values.get("status") or BookInstanceStatus.MAINTENANCE.value,
        # An unparseable date is only kept as raw text for redisplay.
        due_back=due_back if isinstance(due_back, date) else None,
    )


class BookInstanceController(BaseController):
    """Controller for book copy pages."""

    def __init__(
        self,
        session_factory: sessionmaker,
        instances_repo: BookInstancesRepository | None = None,
        books_repo: BooksRepository | None = None,
    ):
        super().__init__(session_factory)
        self.instances_repo = instances_repo or BookInstancesRepository()
        self.books_repo = books_repo or BooksRepository()

    async def list(self) -> Render:
        instances = await self.run(self.instances_repo.list_instances)
        return Render(
            "bookinstance_list.html",
            {"title": "Book Instance List", "bookinstance_list": instances},
        )

    async def detail(self, instance_id: str) -> Render:
        instance = await self.run(self.instances_repo.get_instance, instance_id)
        if instance is None:
            raise NotFoundError("Book copy not found")
        return Render(
            "bookinstance_detail.html",
            {"title": f"Copy: {instance.book.title}", "bookinstance": instance},
        )

    async def create_form(self) -> Render:
        books = await self.run(self.books_repo.list_titles)
        return Render(
            "bookinstance_form.html",
            {
                "title": "Create BookInstance",
                "book_list": books,
                "statuses": list(BookInstanceStatus),
            },
        )

    async def _form_with_errors(self, title: str, result: ValidationResult, instance: BookInstance) -> Render:
        books = await self.run(self.books_repo.list_titles)
        return Render(
            "bookinstance_form.html",
            {
                "title": title,
                "book_list": books,
                "statuses": list(BookInstanceStatus),
                "selected_book": instance.book_id,
                "bookinstance": instance,
                "due_back_input": result.values.get("due_back") or "",
                "errors": result.errors,
            },
        )

    async def create(self, form: Mapping[str, Any]) -> ViewResult:
        result = validate_bookinstance(form)
        instance = _instance_from_form(BookInstance.generate_id(), result)

        if not result.is_valid:
            return await self._form_with_errors("Create BookInstance", result, instance)

        saved = await self.run(self.instances_repo.create_instance, instance)
        logger.info("Created book instance %s of book %s", saved.id, saved.book_id)
        return Redirect(saved.url)

    async def delete_form(self, instance_id: str) -> ViewResult:
        instance = await self.run(self.instances_repo.get_instance, instance_id)
        if instance is None:
            return Redirect(BOOKINSTANCE_LIST_URL, status_code=302)
        return Render(
            "bookinstance_delete.html",
            {"title": "Delete Book Instance", "bookinstance": instance},
        )

    async def delete(self, instance_id: str) -> Redirect:
        await self.run(self.instances_repo.delete_instance, instance_id)
        logger.info("Deleted book instance %s", instance_id)
        return Redirect(BOOKINSTANCE_LIST_URL)

    async def update_form(self, instance_id: str) -> Render:
        books, instance = await self.run_both(
            (self.books_repo.list_titles,),
            (self.instances_repo.get_instance, instance_id),
        )
        if instance is None:
            raise NotFoundError("Book copy not found")
        if not books:
            raise NotFoundError("Book not found")
        return Render(
            "bookinstance_form.html",
            {
                "title": "Update Book Instance",
                "book_list": books,
                "statuses": list(BookInstanceStatus),
                "selected_book": instance.book_id,
                "bookinstance": instance,
                "due_back_input": instance.due_back_yyyy_mm_dd,
            },
        )

    async def update(self, instance_id: str, form: Mapping[str, Any]) -> ViewResult:
        result = validate_bookinstance(form)
        instance = _instance_from_form(instance_id, result)

        if not result.is_valid:
            return await self._form_with_errors("Update Book Instance", result, instance)

        updated = await self.run(self.instances_repo.update_instance, instance)
        if updated is None:
            raise NotFoundError("Book copy not found")
        logger.info("Updated book instance %s", updated.id)
        return Redirect(updated.url)
