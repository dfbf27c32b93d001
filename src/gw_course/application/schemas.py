"""Pydantic schemas for gw_course API responses."""

from pydantic import BaseModel

from src.gw_course.domain.models import GolfCourse, HoleInfo, TeeBox


class HoleResponse(BaseModel):
    number: int
    par: int
    yardage: int
    handicap: int

    @classmethod
    def from_domain(cls, hole: HoleInfo) -> "HoleResponse":
        return cls(number=hole.number, par=hole.par, yardage=hole.yardage, handicap=hole.handicap)


class TeeBoxResponse(BaseModel):
    name: str
    rating: float
    slope: int
    total_par: int
    total_yardage: int
    holes: list[HoleResponse]

    @classmethod
    def from_domain(cls, tee_box: TeeBox) -> "TeeBoxResponse":
        return cls(
            name=tee_box.name,
            rating=tee_box.rating,
            slope=tee_box.slope,
            total_par=tee_box.total_par,
            total_yardage=tee_box.total_yardage,
            holes=[HoleResponse.from_domain(h) for h in tee_box.holes],
        )


class CourseSummary(BaseModel):
    id: str
    name: str
    tee_boxes: list[str]

    @classmethod
    def from_domain(cls, course: GolfCourse) -> "CourseSummary":
        return cls(id=course.id, name=course.name, tee_boxes=[t.name for t in course.tee_boxes])


class CourseListResponse(BaseModel):
    items: list[CourseSummary]
