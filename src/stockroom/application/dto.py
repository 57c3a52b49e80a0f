"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data from the stores to the CLI without exposing the record
types themselves to the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemLineDTO:
    id: int
    name: str
    quantity: int


@dataclass(frozen=True)
class LoggedItemDTO:
    id: int
    name: str
    quantity: int
    date_added: str  # formatted, e.g. "2024-05-01"


@dataclass(frozen=True)
class PatientDTO:
    id: int
    name: str
    age: int
    gender: str


@dataclass(frozen=True)
class PrescriptionDTO:
    id: int
    medication_name: str
    date_issued: str
