"""HTTP controllers for students.

Controllers are intentionally thin: they accept requests, delegate to
`StudentService`, and map the outcome to a status code.

Endpoints implemented:
- POST /api/students/save
- DELETE /api/students/delete/{student_id}
- GET /api/students/all
- GET /api/students/count
- GET /api/students/byYear
- GET /api/students/{student_id}
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlmodel import Session
from . import models, services
from .database import get_session
from .schemas import MAX_STUDENT_ID, StudentIn, StudentOut, YearCount

router = APIRouter(prefix="/api/students", tags=["students"])


def get_student_service(db: Session = Depends(get_session)) -> services.StudentService:
    """FastAPI dependency building a `StudentService` bound to the request session.

    Tests replace it through `app.dependency_overrides`.
    """
    return services.StudentService(db)


@router.post("/save", response_model=StudentOut, status_code=status.HTTP_201_CREATED)
def save(payload: StudentIn, service: services.StudentService = Depends(get_student_service)):
    """Create a student, or update it when `id` names an existing one."""
    student = models.Student(
        id=payload.id,
        nom=payload.nom,
        prenom=payload.prenom,
        date_naissance=payload.date_naissance,
    )
    try:
        saved = service.save(student)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return StudentOut.model_validate(saved)


@router.delete("/delete/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(student_id: int = Path(..., ge=1, le=MAX_STUDENT_ID), service: services.StudentService = Depends(get_student_service)):
    """Delete a student; 404 when no student has that id."""
    if not service.delete(student_id):
        raise HTTPException(status_code=404, detail="student not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/all", response_model=List[StudentOut])
def find_all(service: services.StudentService = Depends(get_student_service)):
    return [StudentOut.model_validate(s) for s in service.find_all()]


@router.get("/count", response_model=int)
def count_student(service: services.StudentService = Depends(get_student_service)):
    """Return the total number of students as a bare integer."""
    return service.count_students()


@router.get("/byYear", response_model=List[YearCount])
def find_by_year(service: services.StudentService = Depends(get_student_service)):
    """Return the number of students per birth year."""
    return list(service.find_nbr_student_by_year())


@router.get("/{student_id}", response_model=StudentOut)
def find_by_id(student_id: int = Path(..., ge=1, le=MAX_STUDENT_ID), service: services.StudentService = Depends(get_student_service)):
    student = service.find_by_id(student_id)
    if not student:
        raise HTTPException(status_code=404, detail="student not found")
    return StudentOut.model_validate(student)
