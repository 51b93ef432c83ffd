# roster/api/routers/students.py
import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status
from sqlalchemy.orm import Session

from roster.core.db import get_db
from roster.core.errors import RosterError
from roster.schemas.student import KEY_MAX, KEY_MIN, StudentIn, StudentOut
from roster.services.students import get_student_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/students", tags=["Students"])

StudentId = Annotated[int, Path(ge=KEY_MIN, le=KEY_MAX)]


def _fail(db: Session, action: str, e: Exception) -> HTTPException:
    """Translate a service failure into the HTTP error to raise."""
    if isinstance(e, RosterError) and e.status_code < 500:
        return HTTPException(status_code=e.status_code, detail=e.message)

    # Server-side failures are logged in full; clients only learn that it failed
    db.rollback()
    logger.exception(f"Failed to {action}")
    return HTTPException(status_code=500, detail=f"Failed to {action}")


@router.get("", response_model=List[StudentOut])
def list_students(db: Session = Depends(get_db)):
    service = get_student_service(db)
    try:
        return service.list_students()
    except Exception as e:
        raise _fail(db, "list students", e)


@router.get("/{student_id}", response_model=StudentOut)
def get_student(student_id: StudentId, db: Session = Depends(get_db)):
    service = get_student_service(db)
    try:
        return service.get_student(student_id)
    except Exception as e:
        raise _fail(db, f"get student {student_id}", e)


@router.post("", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def create_student(
    payload: StudentIn,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    service = get_student_service(db)
    try:
        created = service.create_student(payload)
    except Exception as e:
        raise _fail(db, "create student", e)

    response.headers["Location"] = str(request.app.url_path_for("get_student", student_id=created.id))
    return created


@router.put("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_student(student_id: StudentId, payload: StudentIn, db: Session = Depends(get_db)):
    service = get_student_service(db)
    try:
        service.update_student(student_id, payload)
    except Exception as e:
        raise _fail(db, f"update student {student_id}", e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{student_id}", response_model=StudentOut)
def delete_student(student_id: StudentId, db: Session = Depends(get_db)):
    service = get_student_service(db)
    try:
        return service.delete_student(student_id)
    except Exception as e:
        raise _fail(db, f"delete student {student_id}", e)
