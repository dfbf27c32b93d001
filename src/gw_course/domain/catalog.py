"""Bundled course reference data.

Par and stroke index are shared by every tee at Bayou DeSiard; only the
yardages change. Tee order is longest to shortest.
"""

from src.gw_common.errors import CourseNotFoundError
from src.gw_course.domain.models import GolfCourse, HoleInfo, TeeBox

_BAYOU_PARS = (4, 4, 5, 3, 4, 5, 4, 4, 3, 4, 4, 4, 4, 5, 3, 5, 3, 4)
_BAYOU_HANDICAPS = (7, 3, 11, 1, 9, 17, 13, 5, 15, 6, 8, 14, 4, 10, 16, 18, 12, 2)

# name -> (rating, slope, yardages 1..18)
_BAYOU_TEES: dict[str, tuple[float, int, tuple[int, ...]]] = {
    "Championship": (74.5, 131, (
        376, 388, 554, 200, 416, 544, 406, 458, 174,
        415, 414, 390, 434, 597, 129, 553, 208, 436,
    )),
    "Black": (73.8, 125, (
        376, 388, 517, 200, 377, 544, 406, 416, 174,
        415, 414, 390, 406, 563, 123, 553, 208, 436,
    )),
    "Black/Blue": (72.4, 123, (
        376, 388, 497, 174, 360, 544, 406, 378, 174,
        394, 414, 350, 392, 524, 123, 553, 175, 408,
    )),
    "Blue": (71.5, 122, (
        359, 366, 497, 174, 360, 499, 369, 378, 155,
        394, 396, 350, 392, 524, 109, 522, 175, 408,
    )),
    "Blue/Gold": (69.7, 118, (
        343, 354, 482, 174, 316, 499, 346, 342, 155,
        394, 327, 339, 327, 475, 109, 480, 175, 349,
    )),
    "Gold": (68.8, 117, (
        343, 354, 482, 136, 316, 467, 346, 342, 145,
        358, 327, 339, 327, 475, 101, 480, 141, 349,
    )),
    "White": (66.5, 110, (
        318, 321, 430, 129, 283, 436, 315, 336, 100,
        353, 301, 309, 286, 470, 73, 445, 116, 316,
    )),
    "Green": (62.8, 100, (
        262, 255, 364, 129, 229, 376, 250, 259, 100,
        282, 259, 223, 220, 394, 73, 360, 116, 268,
    )),
}


def build_tee_box(
    name: str,
    rating: float,
    slope: int,
    pars: tuple[int, ...],
    yardages: tuple[int, ...],
    handicaps: tuple[int, ...],
) -> TeeBox:
    holes = tuple(
        HoleInfo(number=i + 1, par=par, yardage=yards, handicap=hcp)
        for i, (par, yards, hcp) in enumerate(zip(pars, yardages, handicaps, strict=True))
    )
    return TeeBox(name=name, rating=rating, slope=slope, holes=holes)


BAYOU_DESIARD = GolfCourse(
    id="bayou-desiard",
    name="Bayou DeSiard Country Club",
    tee_boxes=tuple(
        build_tee_box(name, rating, slope, _BAYOU_PARS, yardages, _BAYOU_HANDICAPS)
        for name, (rating, slope, yardages) in _BAYOU_TEES.items()
    ),
)

_COURSES: dict[str, GolfCourse] = {BAYOU_DESIARD.id: BAYOU_DESIARD}


def list_courses() -> list[GolfCourse]:
    return list(_COURSES.values())


def get_course(course_id: str) -> GolfCourse:
    course = _COURSES.get(course_id)
    if course is None:
        raise CourseNotFoundError(course_id)
    return course
