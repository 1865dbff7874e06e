"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and provide validation for
controller handlers and tests. Field names follow the wire format used by
the dashboard frontend (`dateNaissance`), while Python code uses
`date_naissance`.
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


NAME_MAX_LENGTH = 100
# Ids stay within a signed 32-bit integer on the wire
MAX_STUDENT_ID = 2_147_483_647


class StudentIn(BaseModel):
    """Payload for the save endpoint.

    An `id` matching an existing student turns the save into an update.
    Names are trimmed before their length is checked.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(None, ge=1, le=MAX_STUDENT_ID)
    nom: str = Field(..., description="Nom de famille")
    prenom: Optional[str] = Field(None, description="Prénom")
    date_naissance: Optional[date] = Field(None, alias="dateNaissance", description="Date de naissance (yyyy-mm-dd)")

    @field_validator("nom")
    @classmethod
    def validate_nom(cls, v: str) -> str:
        """Trim the family name and reject blank or overlong values."""
        v = v.strip()
        if not v:
            raise ValueError("nom must not be blank")
        if len(v) > NAME_MAX_LENGTH:
            raise ValueError(f"nom must be at most {NAME_MAX_LENGTH} characters")
        return v

    @field_validator("prenom")
    @classmethod
    def validate_prenom(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if len(v) > NAME_MAX_LENGTH:
            raise ValueError(f"prenom must be at most {NAME_MAX_LENGTH} characters")
        return v or None

    @field_validator("date_naissance", mode="before")
    @classmethod
    def validate_date_naissance(cls, v):
        """Only accept ISO `yyyy-mm-dd` strings; numbers are not timestamps here."""
        if v is None or isinstance(v, date):
            return v
        if not isinstance(v, str):
            raise ValueError("dateNaissance must be an ISO date string (yyyy-mm-dd)")
        return v


class StudentOut(BaseModel):
    """Student representation returned by the API."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    nom: str
    prenom: Optional[str] = None
    date_naissance: Optional[date] = Field(None, alias="dateNaissance")


class YearCount(BaseModel):
    """Number of students born in a given year."""
    year: int
    total: int
