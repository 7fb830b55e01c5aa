"""Course catalog API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List

from courses import JsonCourseRepository
from api.dependencies import get_courses, load_course
from api.schemas import CourseSummaryResponse, HandicapResponse
from models import Course
from scoring.handicap import course_handicap, max_score, strokes_on

router = APIRouter()


def _summarize_course(c: Course) -> CourseSummaryResponse:
    return CourseSummaryResponse(
        id=c.id,
        name=c.name,
        location=c.location,
        par=c.get_par(),
        total_holes=len(c.holes),
        tee_count=len(c.tee_boxes),
        tees=[t.name for t in c.tee_boxes],
    )


@router.get("", response_model=List[CourseSummaryResponse])
async def list_courses(courses: JsonCourseRepository = Depends(get_courses)):
    return [_summarize_course(c) for c in courses.list_courses()]


@router.get("/{course_id}", response_model=Course)
async def get_course(course_id: str, courses: JsonCourseRepository = Depends(get_courses)):
    return load_course(courses, course_id)


@router.get("/{course_id}/handicap", response_model=HandicapResponse)
async def get_handicap(
    course_id: str,
    tee: str = Query(...),
    handicap_index: float = Query(..., ge=-10, le=54),
    courses: JsonCourseRepository = Depends(get_courses),
):
    """Course handicap from the tee's slope, and the strokes it gives hole by hole."""
    course = load_course(courses, course_id)
    tee_box = course.get_tee(tee)
    if not tee_box:
        raise HTTPException(404, "Tee not found")

    ch = course_handicap(handicap_index, tee_box.slope_rating)
    strokes = {h.number: strokes_on(h, ch) for h in course.holes}
    return HandicapResponse(
        course_id=course.id,
        tee=tee_box.name,
        handicap_index=handicap_index,
        course_handicap=ch,
        strokes_by_hole=strokes,
        max_score_by_hole={h.number: max_score(h.par, strokes[h.number]) for h in course.holes},
    )
