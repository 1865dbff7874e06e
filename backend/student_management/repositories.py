"""Repository classes encapsulating database operations.

Repositories return SQLModel objects and perform commits/refreshes where
appropriate.
"""

from typing import List, Optional, Tuple
from sqlmodel import Session, select
from sqlalchemy import extract, func
from . import models


class StudentRepository:
    """CRUD and aggregate queries for `Student` objects."""
    def __init__(self, session: Session):
        self.session = session

    def get(self, student_id: int) -> Optional[models.Student]:
        """Get a `Student` by primary key."""
        return self.session.get(models.Student, student_id)

    def save(self, student: models.Student) -> models.Student:
        """Upsert a student and return the managed instance.

        A student whose `id` matches an existing row updates that row;
        any other student is inserted and receives a store-assigned id.
        """
        existing = self.get(student.id) if student.id is not None else None
        if existing:
            existing.nom = student.nom
            existing.prenom = student.prenom
            existing.date_naissance = student.date_naissance
            self.session.add(existing)
            self.session.commit()
            self.session.refresh(existing)
            return existing
        student.id = None
        self.session.add(student)
        self.session.commit()
        self.session.refresh(student)
        return student

    def delete(self, student_id: int) -> bool:
        """Delete a student by id; return False when no row matched."""
        existing = self.get(student_id)
        if not existing:
            return False
        self.session.delete(existing)
        self.session.commit()
        return True

    def list_all(self) -> List[models.Student]:
        """Return every student ordered by id."""
        stmt = select(models.Student).order_by(models.Student.id)
        return list(self.session.exec(stmt).all())

    def count(self) -> int:
        """Return the number of stored students."""
        stmt = select(func.count(models.Student.id))
        return int(self.session.exec(stmt).one())

    def count_by_birth_year(self) -> List[Tuple[int, int]]:
        """Return `(year, total)` pairs ascending by year.

        Students without a birth date are left out.
        """
        year = extract("year", models.Student.date_naissance)
        stmt = (
            select(year, func.count(models.Student.id))
            .where(models.Student.date_naissance.is_not(None))
            .group_by(year)
            .order_by(year)
        )
        return [(int(y), int(total)) for y, total in self.session.exec(stmt).all()]
