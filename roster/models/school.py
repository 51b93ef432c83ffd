# roster/models/school.py
from __future__ import annotations
from sqlalchemy import String, Integer, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from roster.models.base import Base

class School(Base):
    __tablename__ = "schools"

    # Keys are supplied by the caller, never generated
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    city: Mapped[str] = mapped_column(String(128), nullable=False)
    state: Mapped[str] = mapped_column(String(64), nullable=False)

    # Relationships (deleting a school that still has teachers is rejected by the FK)
    teachers: Mapped[list["Teacher"]] = relationship("Teacher", back_populates="school", passive_deletes="all")

    __table_args__ = (
        CheckConstraint("name <> ''", name="ck_schools_name"),
        CheckConstraint("city <> ''", name="ck_schools_city"),
        CheckConstraint("state <> ''", name="ck_schools_state"),
    )
