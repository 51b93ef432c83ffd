from roster.models.base import Base
from roster.models.school import School
from roster.models.teacher import Teacher
from roster.models.class_model import SchoolClass
from roster.models.student import Student

__all__ = ["Base", "School", "Teacher", "SchoolClass", "Student"]
