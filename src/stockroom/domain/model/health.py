"""Patient and prescription records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Patient:
    id: int
    name: str
    age: int
    gender: str


@dataclass(frozen=True)
class Prescription:
    """A medication issued to a patient, linked by ``patient_id``."""

    id: int
    patient_id: int
    medication_name: str
    date_issued: datetime
