"""
Book instance routes.
"""
from fastapi import APIRouter, Form, Request

from api.views import to_response
from controllers import BookInstanceController
from db import SessionLocal

router = APIRouter()
controller = BookInstanceController(SessionLocal)


def _form(book: str, imprint: str, status: str, due_back: str) -> dict:
    return {"book": book, "imprint": imprint, "status": status, "due_back": due_back}


@router.get("/bookinstances")
async def bookinstance_list(request: Request):
    return to_response(request, await controller.list())


@router.get("/bookinstance/create")
async def bookinstance_create_get(request: Request):
    return to_response(request, await controller.create_form())


@router.post("/bookinstance/create")
async def bookinstance_create_post(
    request: Request,
    book: str = Form(""),
    imprint: str = Form(""),
    status: str = Form(""),
    due_back: str = Form(""),
):
    result = await controller.create(_form(book, imprint, status, due_back))
    return to_response(request, result)


@router.post("/bookinstance/delete")
async def bookinstance_delete_post(request: Request, bookinstanceid: str = Form("")):
    return to_response(request, await controller.delete(bookinstanceid))


@router.get("/bookinstance/{instance_id}")
async def bookinstance_detail(request: Request, instance_id: str):
    return to_response(request, await controller.detail(instance_id))


@router.get("/bookinstance/{instance_id}/delete")
async def bookinstance_delete_get(request: Request, instance_id: str):
    return to_response(request, await controller.delete_form(instance_id))


@router.get("/bookinstance/{instance_id}/update")
async def bookinstance_update_get(request: Request, instance_id: str):
    return to_response(request, await controller.update_form(instance_id))


@router.post("/bookinstance/{instance_id}/update")
async def bookinstance_update_post(
    request: Request,
    instance_id: str,
    book: str = Form(""),
    imprint: str = Form(""),
    status: str = Form(""),
    due_back: str = Form(""),
):
    result = await controller.update(instance_id, _form(book, imprint, status, due_back))
    return to_response(request, result)
