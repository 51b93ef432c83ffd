# roster/services/mapping.py
"""
Conversions between persisted Student rows and the flat transfer record.

The record carries ids only. teacherId and schoolId are derived by walking
Student -> Class -> Teacher -> School with explicit key lookups; every hop
can fail on its own and reports which link is broken.
"""

from sqlalchemy.orm import Session

from roster.core.errors import ConsistencyError
from roster.models.school import School
from roster.models.teacher import Teacher
from roster.models.class_model import SchoolClass
from roster.models.student import Student
from roster.schemas.student import StudentIn, StudentOut


def to_transfer_record(db: Session, student: Student) -> StudentOut:
    class_obj = db.get(SchoolClass, student.class_id)
    if class_obj is None:
        raise ConsistencyError(f"Student {student.id} references missing class {student.class_id}")

    teacher = db.get(Teacher, class_obj.teacher_id)
    if teacher is None:
        raise ConsistencyError(f"Class {class_obj.id} references missing teacher {class_obj.teacher_id}")

    school = db.get(School, teacher.school_id)
    if school is None:
        raise ConsistencyError(f"Teacher {teacher.id} references missing school {teacher.school_id}")

    return StudentOut(
        id=student.id,
        name=student.name,
        class_id=class_obj.id,
        teacher_id=teacher.id,
        school_id=school.id,
    )


def to_entity(record: StudentIn, resolved_class: SchoolClass) -> Student:
    """Build a new Student bound to an already validated class."""
    if resolved_class.id != record.class_id:
        raise ConsistencyError(
            f"Resolved class {resolved_class.id} does not match record classId {record.class_id}"
        )
    return Student(id=record.id, name=record.name, class_id=resolved_class.id)


def apply_update(student: Student, record: StudentIn, resolved_class: SchoolClass) -> None:
    if record.id != student.id:
        raise ConsistencyError(f"Record id {record.id} does not match student {student.id}")
    if resolved_class.id != record.class_id:
        raise ConsistencyError(
            f"Resolved class {resolved_class.id} does not match record classId {record.class_id}"
        )
    student.name = record.name
    student.class_id = resolved_class.id
    student.class_ = resolved_class
