from __future__ import annotations

import json
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from versepost.api.deps import get_person_service, get_upload_service
from versepost.models.person import PersonCreate, PersonUpdate
from versepost.services.person import PersonService
from versepost.services.uploads import UploadService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/person", tags=["person"])

PersonServiceDep = Annotated[PersonService, Depends(get_person_service)]


@router.post("", response_model=str)
def create_person(body: PersonCreate, service: PersonServiceDep):
    return service.create(body)


@router.get("", response_model=str)
def list_people(service: PersonServiceDep):
    return service.find_all()


@router.post("/file", response_model=str)
async def upload_files(
    request: Request,
    uploads: Annotated[UploadService, Depends(get_upload_service)],
):
    """Store every file part of a multipart form; echo the plain fields back.

    A field sent more than once is echoed as a list of its values.
    """
    data: dict[str, str | list[str]] = {}
    stored = []
    async with request.form() as form:
        for key, value in form.multi_items():
            if isinstance(value, UploadFile):
                stored.append(await uploads.store(key, value.filename, await value.read()))
        for key in form.keys():
            values = [v for v in form.getlist(key) if not isinstance(v, UploadFile)]
            if values:
                data[key] = values[0] if len(values) == 1 else values
    logger.info(f"Received {len(stored)} file(s): {[f.originalname for f in stored]}")
    return f"upload files: {json.dumps(data, ensure_ascii=False, separators=(',', ':'))}"


@router.get("/{id}", response_model=str)
def get_person(id: int, service: PersonServiceDep):
    return service.find_one(id)


@router.patch("/{id}", response_model=str)
def update_person(id: int, body: PersonUpdate, service: PersonServiceDep):
    return service.update(id, body)


@router.delete("/{id}", response_model=str)
def delete_person(id: int, service: PersonServiceDep):
    return service.remove(id)
