# roster/models/class_model.py - "class" is reserved, so the model is SchoolClass
from __future__ import annotations
from sqlalchemy import String, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from roster.models.base import Base

class SchoolClass(Base):
    __tablename__ = "classes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    teacher_id: Mapped[int] = mapped_column(Integer, ForeignKey("teachers.id", ondelete="RESTRICT"), index=True, nullable=False)

    # Relationships
    teacher: Mapped["Teacher"] = relationship("Teacher", back_populates="classes")
    students: Mapped[list["Student"]] = relationship("Student", back_populates="class_", passive_deletes="all")

    __table_args__ = (
        CheckConstraint("name <> ''", name="ck_classes_name"),
    )
