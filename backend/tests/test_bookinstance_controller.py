import asyncio
from datetime import date

import pytest

from controllers import BookInstanceController, Redirect, Render
from domain.errors import NotFoundError, StorageError
from domain.models import BookInstance
from repositories import BookInstancesRepository


@pytest.fixture
def controller(session_factory):
    return BookInstanceController(session_factory)


@pytest.fixture
def add_instance(session_factory):
    def _add(book_id: str, imprint: str = "Penguin", status: str = "Available", due_back=None) -> BookInstance:
        instance = BookInstance(
            id=BookInstance.generate_id(),
            book_id=book_id,
            imprint=imprint,
            status=status,
            due_back=due_back,
        )
        with session_factory() as session:
            return BookInstancesRepository().create_instance(session, instance)

    return _add


def _count(session_factory):
    with session_factory() as session:
        return len(BookInstancesRepository().list_instances(session))


def test_list_populates_books(controller, add_book, add_instance):
    book = add_book("Dune")
    add_instance(book.id)

    result = asyncio.run(controller.list())

    [instance] = result.context["bookinstance_list"]
    assert instance.book.title == "Dune"


def test_detail_title_uses_book_title(controller, add_book, add_instance):
    book = add_book("Dune")
    instance = add_instance(book.id, due_back=date(2026, 10, 19))

    result = asyncio.run(controller.detail(instance.id))

    assert result.context["title"] == "Copy: Dune"
    assert result.context["bookinstance"].due_back_formatted == "Oct 19, 2026"


def test_detail_missing_raises_not_found(controller):
    with pytest.raises(NotFoundError) as excinfo:
        asyncio.run(controller.detail("nope"))
    assert excinfo.value.message == "Book copy not found"


def test_create_form_lists_book_titles(controller, add_book):
    add_book("Emma")
    add_book("Dune")

    result = asyncio.run(controller.create_form())

    assert [b.title for b in result.context["book_list"]] == ["Dune", "Emma"]


def test_create_without_book_rerenders_with_one_error(controller, session_factory, add_book):
    add_book("Dune")
    form = {"book": "", "imprint": "Penguin", "status": "Available", "due_back": ""}

    result = asyncio.run(controller.create(form))

    assert isinstance(result, Render)
    assert result.status_code == 200
    assert [e.param for e in result.context["errors"]] == ["book"]
    assert result.context["bookinstance"].imprint == "Penguin"
    assert [b.title for b in result.context["book_list"]] == ["Dune"]
    assert _count(session_factory) == 0


def test_create_invalid_keeps_selected_book(controller, add_book):
    book = add_book("Dune")
    form = {"book": book.id, "imprint": "  ", "status": "Loaned", "due_back": "2026-10-19"}

    result = asyncio.run(controller.create(form))

    assert result.context["selected_book"] == book.id
    assert result.context["bookinstance"].due_back == date(2026, 10, 19)


def test_create_persists_and_redirects(controller, add_book):
    book = add_book("Dune")
    form = {"book": book.id, "imprint": " Ace, 1990 ", "status": "Loaned", "due_back": "2026-10-19"}

    result = asyncio.run(controller.create(form))

    assert isinstance(result, Redirect)
    instance_id = result.url.rsplit("/", 1)[-1]
    detail = asyncio.run(controller.detail(instance_id))
    saved = detail.context["bookinstance"]
    assert saved.book_id == book.id
    assert saved.imprint == "Ace, 1990"
    assert saved.status == "Loaned"
    assert saved.due_back == date(2026, 10, 19)


def test_create_blank_status_defaults_to_maintenance(controller, add_book):
    book = add_book("Dune")

    result = asyncio.run(controller.create({"book": book.id, "imprint": "Ace", "status": ""}))

    detail = asyncio.run(controller.detail(result.url.rsplit("/", 1)[-1]))
    assert detail.context["bookinstance"].status == "Maintenance"
    assert detail.context["bookinstance"].due_back is None


def test_create_for_unknown_book_is_storage_error(controller):
    form = {"book": "no-such-book", "imprint": "Ace", "status": "Available"}

    with pytest.raises(StorageError):
        asyncio.run(controller.create(form))


def test_delete_form_missing_redirects_to_list(controller):
    result = asyncio.run(controller.delete_form("nope"))

    assert isinstance(result, Redirect)
    assert result.url == "/catalog/bookinstances"


def test_delete_form_renders_confirmation(controller, add_book, add_instance):
    instance = add_instance(add_book("Dune").id)

    result = asyncio.run(controller.delete_form(instance.id))

    assert result.template == "bookinstance_delete.html"
    assert result.context["bookinstance"].id == instance.id


def test_delete_is_unconditional_and_idempotent(controller, session_factory, add_book, add_instance):
    instance = add_instance(add_book("Dune").id)

    first = asyncio.run(controller.delete(instance.id))
    second = asyncio.run(controller.delete(instance.id))

    assert first.url == second.url == "/catalog/bookinstances"
    assert _count(session_factory) == 0


def test_update_form_prefills_selection(controller, add_book, add_instance):
    book = add_book("Dune")
    instance = add_instance(book.id, due_back=date(2026, 1, 5))

    result = asyncio.run(controller.update_form(instance.id))

    assert result.context["selected_book"] == book.id
    assert result.context["due_back_input"] == "2026-01-05"


def test_update_form_missing_instance_raises_not_found(controller, add_book):
    add_book("Dune")

    with pytest.raises(NotFoundError):
        asyncio.run(controller.update_form("nope"))


def test_update_overwrites_in_place(controller, add_book, add_instance):
    dune = add_book("Dune")
    emma = add_book("Emma")
    instance = add_instance(dune.id)
    form = {"book": emma.id, "imprint": "Penguin Classics", "status": "Reserved", "due_back": ""}

    result = asyncio.run(controller.update(instance.id, form))

    assert result.url == f"/catalog/bookinstance/{instance.id}"
    detail = asyncio.run(controller.detail(instance.id))
    assert detail.context["title"] == "Copy: Emma"
    assert detail.context["bookinstance"].status == "Reserved"


def test_update_invalid_rerenders_with_errors(controller, add_book, add_instance):
    instance = add_instance(add_book("Dune").id)
    form = {"book": "", "imprint": "", "status": "Reserved", "due_back": "someday"}

    result = asyncio.run(controller.update(instance.id, form))

    assert isinstance(result, Render)
    assert result.context["title"] == "Update Book Instance"
    assert [e.param for e in result.context["errors"]] == ["book", "imprint", "due_back"]
    assert result.context["due_back_input"] == "someday"
    unchanged = asyncio.run(controller.detail(instance.id))
    assert unchanged.context["bookinstance"].imprint == "Penguin"
