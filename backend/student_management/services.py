"""Business logic services used by HTTP controllers.

Services are intentionally thin: they perform validation, execute
domain logic and persist aggregates via repositories.
"""

import logging
from datetime import date
from typing import List, Optional
from sqlmodel import Session
from . import models, repositories
from .schemas import YearCount

logger = logging.getLogger("student_management.services")


class StudentService:
    """Student operations consumed by the students controller."""
    def __init__(self, session: Session):
        self.session = session
        self.student_repo = repositories.StudentRepository(session)

    def save(self, student: models.Student) -> models.Student:
        """Insert or update `student` and return the persisted instance.

        Raises ValueError when the birth date lies in the future.
        """
        if student.date_naissance and student.date_naissance > date.today():
            raise ValueError("dateNaissance must not be in the future")
        saved = self.student_repo.save(student)
        logger.info("student_saved id=%s", saved.id)
        return saved

    def delete(self, student_id: int) -> bool:
        """Remove the student; return whether a row existed."""
        deleted = self.student_repo.delete(student_id)
        if deleted:
            logger.info("student_deleted id=%s", student_id)
        return deleted

    def find_all(self) -> List[models.Student]:
        return self.student_repo.list_all()

    def find_by_id(self, student_id: int) -> Optional[models.Student]:
        return self.student_repo.get(student_id)

    def count_students(self) -> int:
        return self.student_repo.count()

    def find_nbr_student_by_year(self) -> List[YearCount]:
        """Return how many students were born in each year."""
        return [YearCount(year=y, total=t) for y, t in self.student_repo.count_by_birth_year()]
