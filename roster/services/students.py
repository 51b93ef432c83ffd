# roster/services/students.py
"""
Student roster operations.

Each public method is one logical operation over the session it was given:
resolve what it needs, mutate, commit once. Failures are reported with the
domain errors from roster.core.errors and nothing is written in that case.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from roster.core.errors import ConflictError, InvalidRecordError, NotFoundError
from roster.models.class_model import SchoolClass
from roster.models.student import Student
from roster.schemas.student import StudentIn, StudentOut
from roster.services.mapping import apply_update, to_entity, to_transfer_record

logger = logging.getLogger(__name__)


class StudentService:
    """CRUD over students with relationship validation"""

    def __init__(self, db: Session):
        self.db = db

    def list_students(self) -> List[StudentOut]:
        rows = self.db.execute(select(Student).order_by(Student.id)).scalars().all()
        return [to_transfer_record(self.db, s) for s in rows]

    def get_student(self, student_id: int) -> StudentOut:
        student = self._require_student(student_id)
        return to_transfer_record(self.db, student)

    def create_student(self, record: StudentIn) -> StudentOut:
        # 1. Name is required
        if not record.name:
            raise InvalidRecordError("Student name is required")

        # 2. Class must exist (reported as 404, not 400)
        class_obj = self.db.get(SchoolClass, record.class_id)
        if class_obj is None:
            raise NotFoundError(f"Class {record.class_id} not found")

        # 3. Keys are caller-assigned and must be fresh
        if self.db.get(Student, record.id) is not None:
            raise ConflictError(f"Student {record.id} already exists")

        # 4. Persist
        student = to_entity(record, class_obj)
        self.db.add(student)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Another request inserted the same key between the check and the commit
            self.db.rollback()
            logger.warning(f"Create of student {record.id} lost to a concurrent insert: {e.orig}")
            raise ConflictError(f"Student {record.id} already exists") from e

        logger.info(f"Created student {student.id} in class {class_obj.id}")
        return to_transfer_record(self.db, student)

    def update_student(self, student_id: int, record: StudentIn) -> None:
        if record.id != student_id or not record.name:
            raise InvalidRecordError(
                f"Body id {record.id} must match path id {student_id} and name is required"
            )

        student = self._require_student(student_id)

        if record.class_id != student.class_id:
            class_obj = self.db.get(SchoolClass, record.class_id)
            if class_obj is None:
                raise NotFoundError(f"Class {record.class_id} not found")
        else:
            class_obj = student.class_

        apply_update(student, record, class_obj)
        self.db.commit()
        logger.info(f"Updated student {student_id} (class {class_obj.id})")

    def delete_student(self, student_id: int) -> StudentOut:
        student = self._require_student(student_id)

        # Capture before removal; the row is gone after commit
        deleted = to_transfer_record(self.db, student)
        self.db.delete(student)
        self.db.commit()

        logger.info(f"Deleted student {student_id}")
        return deleted

    def _require_student(self, student_id: int) -> Student:
        student = self.db.get(Student, student_id)
        if student is None:
            raise NotFoundError(f"Student {student_id} not found")
        return student


def get_student_service(db: Session) -> StudentService:
    """Factory function to get student service instance"""
    return StudentService(db)
