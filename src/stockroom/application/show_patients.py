"""Application service: Show Patients use case (query)."""

from __future__ import annotations

from stockroom.application.dto import PatientDTO
from stockroom.domain.model.health import Patient
from stockroom.domain.repository.repository import Repository


class ShowPatientsHandler:

    def __init__(self, patients: Repository[Patient]) -> None:
        self._patients = patients

    def handle(self) -> list[PatientDTO]:
        return [
            PatientDTO(id=p.id, name=p.name, age=p.age, gender=p.gender)
            for p in self._patients.get_all()
        ]
