"""gw_course REST endpoints (bundled reference data, read-only).

GET /courses                                 — every bundled course
GET /courses/{course_id}/tee-boxes/{name}    — one tee box with its 18 holes
"""

from fastapi import APIRouter, Request

from src.gw_common.response import ApiResponse, respond
from src.gw_course.application.schemas import (
    CourseListResponse,
    CourseSummary,
    TeeBoxResponse,
)
from src.gw_course.domain.catalog import get_course, list_courses

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("")
async def get_courses(request: Request) -> ApiResponse:
    result = CourseListResponse(items=[CourseSummary.from_domain(c) for c in list_courses()])
    return respond(request, result.model_dump())


@router.get("/{course_id}/tee-boxes/{name:path}")  # "Black/Blue" carries a slash
async def get_tee_box(course_id: str, name: str, request: Request) -> ApiResponse:
    tee_box = get_course(course_id).tee_box(name)
    return respond(request, TeeBoxResponse.from_domain(tee_box).model_dump())
