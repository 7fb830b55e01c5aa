from pathlib import Path

from .repository import CourseNotFoundError, CourseRepository, JsonCourseRepository

DATA_DIR = Path(__file__).resolve().parent / "data"


def bundled_courses() -> JsonCourseRepository:
    """Repository over the course tables shipped with the package."""
    return JsonCourseRepository(DATA_DIR)


__all__ = [
    "CourseNotFoundError",
    "CourseRepository",
    "JsonCourseRepository",
    "bundled_courses",
    "DATA_DIR",
]
