"""REST API for validating documents on every editor change.

Handlers are plain functions so FastAPI runs them in its worker threads.
"""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from robotslint.diagnostics import to_diagnostics
from robotslint.validator import format_validation_results, validate_robots_txt

router = APIRouter(tags=["validate"])


class Document(BaseModel):
    content: str


@router.post("/validate")
def validate(body: Document):
    return validate_robots_txt(body.content).to_dict()


@router.post("/diagnostics")
def diagnostics(body: Document):
    result = validate_robots_txt(body.content)
    return [d.to_dict() for d in to_diagnostics(body.content, result)]


@router.post("/format")
def format_results(body: Document):
    result = validate_robots_txt(body.content)
    return {"text": format_validation_results(result)}
