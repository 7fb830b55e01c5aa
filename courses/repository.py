import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from models import Course

logger = logging.getLogger(__name__)


class CourseNotFoundError(LookupError):
    """No course with the requested id."""


class CourseRepository(Protocol):
    """Read-only source of course tables.

    Any class with matching method signatures satisfies this protocol.
    """

    def list_courses(self) -> List[Course]:
        ...

    def get_course(self, course_id: str) -> Optional[Course]:
        """Look up a course by its ID."""
        ...


class JsonCourseRepository:
    """Courses loaded from a directory of JSON files, one course per file."""

    def __init__(self, data_dir: Path):
        self._data_dir = Path(data_dir)
        self._courses: Optional[Dict[str, Course]] = None

    def _load(self) -> Dict[str, Course]:
        if self._courses is None:
            courses: Dict[str, Course] = {}
            for path in sorted(self._data_dir.glob("*.json")):
                with open(path, "r", encoding="utf-8") as f:
                    course = Course.model_validate(json.load(f))
                course_id = course.id or path.stem
                courses[course_id] = course.model_copy(update={"id": course_id})
            logger.info("Loaded %d course(s) from %s", len(courses), self._data_dir)
            self._courses = courses
        return self._courses

    def list_courses(self) -> List[Course]:
        return list(self._load().values())

    def get_course(self, course_id: str) -> Optional[Course]:
        return self._load().get(course_id)

    def require_course(self, course_id: str) -> Course:
        """Like get_course, but raises CourseNotFoundError when missing."""
        course = self.get_course(course_id)
        if course is None:
            raise CourseNotFoundError(f"Course {course_id!r} not found")
        return course
