# roster/models/teacher.py
from __future__ import annotations
from sqlalchemy import String, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from roster.models.base import Base

class Teacher(Base):
    __tablename__ = "teachers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    school_id: Mapped[int] = mapped_column(Integer, ForeignKey("schools.id", ondelete="RESTRICT"), index=True, nullable=False)

    # Relationships
    school: Mapped["School"] = relationship("School", back_populates="teachers")
    classes: Mapped[list["SchoolClass"]] = relationship("SchoolClass", back_populates="teacher", passive_deletes="all")

    __table_args__ = (
        CheckConstraint("name <> ''", name="ck_teachers_name"),
    )
