# roster/services/seed.py - sample roster for local development and tests
import logging

from sqlalchemy.orm import Session

from roster.models.school import School
from roster.models.teacher import Teacher
from roster.models.class_model import SchoolClass
from roster.models.student import Student

logger = logging.getLogger(__name__)

SAMPLE_SCHOOL = {"id": 1, "name": "School of Hard Knocks", "city": "Life", "state": "Madness"}
SAMPLE_TEACHER = {"id": 1, "name": "Mrs. Stricter", "school_id": 1}
SAMPLE_CLASS = {"id": 1, "name": "Fifth Grade Class", "teacher_id": 1}
SAMPLE_STUDENTS = [
    {"id": 1, "name": "Jim Bob", "class_id": 1},
    {"id": 2, "name": "Jane Doe", "class_id": 1},
]


def seed_sample_roster(db: Session) -> bool:
    """Insert one school, teacher, class and two students.

    Returns False without touching anything when school 1 already exists.
    """
    if db.get(School, SAMPLE_SCHOOL["id"]) is not None:
        logger.info("Sample roster already present, skipping seed")
        return False

    db.add(School(**SAMPLE_SCHOOL))
    db.add(Teacher(**SAMPLE_TEACHER))
    db.add(SchoolClass(**SAMPLE_CLASS))
    db.flush()
    for student in SAMPLE_STUDENTS:
        db.add(Student(**student))

    db.commit()
    logger.info(f"Seeded sample roster with {len(SAMPLE_STUDENTS)} students")
    return True
