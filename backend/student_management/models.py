"""SQLModel data models.

This module defines the application's database tables using SQLModel.
"""

from typing import Optional
from datetime import date
from sqlmodel import SQLModel, Field


class Student(SQLModel, table=True):
    """A registered student.

    Fields:
    - `nom`: family name
    - `prenom`: given name
    - `date_naissance`: birth date, also the source of the per-year counts
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    nom: str = Field(index=True, nullable=False, max_length=100)
    prenom: Optional[str] = Field(default=None, max_length=100)
    date_naissance: Optional[date] = Field(default=None, index=True)
