from fastapi import HTTPException, Request

from courses import CourseNotFoundError, JsonCourseRepository
from models import Course


def get_courses(request: Request) -> JsonCourseRepository:
    """FastAPI dependency that provides the course repository."""
    return request.app.state.courses


def load_course(courses: JsonCourseRepository, course_id: str) -> Course:
    """Course by id, as a 404 when it is not in the catalog."""
    try:
        return courses.require_course(course_id)
    except CourseNotFoundError:
        raise HTTPException(404, "Course not found")
