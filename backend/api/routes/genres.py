"""
Genre routes.
"""
from fastapi import APIRouter, Form, Request

from api.views import to_response
from controllers import GenreController
from db import SessionLocal

router = APIRouter()
controller = GenreController(SessionLocal)


@router.get("/genres")
async def genre_list(request: Request):
    return to_response(request, await controller.list())


# Literal paths go before /genre/{genre_id}.
@router.get("/genre/create")
async def genre_create_get(request: Request):
    return to_response(request, await controller.create_form())


@router.post("/genre/create")
async def genre_create_post(request: Request, name: str = Form("")):
    return to_response(request, await controller.create({"name": name}))


@router.post("/genre/delete")
async def genre_delete_post(request: Request, genreid: str = Form("")):
    return to_response(request, await controller.delete(genreid))


@router.get("/genre/{genre_id}")
async def genre_detail(request: Request, genre_id: str):
    return to_response(request, await controller.detail(genre_id))


@router.get("/genre/{genre_id}/delete")
async def genre_delete_get(request: Request, genre_id: str):
    return to_response(request, await controller.delete_form(genre_id))


@router.get("/genre/{genre_id}/update")
async def genre_update_get(request: Request, genre_id: str):
    return to_response(request, await controller.update_form(genre_id))


@router.post("/genre/{genre_id}/update")
async def genre_update_post(request: Request, genre_id: str, name: str = Form("")):
    return to_response(request, await controller.update(genre_id, {"name": name}))
