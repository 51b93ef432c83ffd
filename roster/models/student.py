# roster/models/student.py
from __future__ import annotations
from sqlalchemy import String, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from roster.models.base import Base

class Student(Base):
    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    class_id: Mapped[int] = mapped_column(Integer, ForeignKey("classes.id", ondelete="RESTRICT"), index=True, nullable=False)

    # Relationships
    class_: Mapped["SchoolClass"] = relationship("SchoolClass", back_populates="students")

    __table_args__ = (
        CheckConstraint("name <> ''", name="ck_students_name"),
    )
