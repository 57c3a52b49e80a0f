"""Application service: Prescriptions By Patient use case (query).

Groups the prescription store by ``patient_id``. The grouping is rebuilt
from the store on every call, so it never drifts from the stored records.
"""

from __future__ import annotations

from collections import defaultdict

from stockroom.application.dto import PrescriptionDTO
from stockroom.domain.model.health import Prescription
from stockroom.domain.repository.repository import Repository


class PrescriptionsByPatientHandler:

    def __init__(self, prescriptions: Repository[Prescription]) -> None:
        self._prescriptions = prescriptions

    def build_map(self) -> dict[int, list[Prescription]]:
        """Map each patient id to their prescriptions, in store order."""
        grouped: dict[int, list[Prescription]] = defaultdict(list)
        for prescription in self._prescriptions.get_all():
            grouped[prescription.patient_id].append(prescription)
        return dict(grouped)

    def handle(self, patient_id: int) -> list[PrescriptionDTO]:
        """Return the patient's prescriptions; empty if they have none."""
        return [
            PrescriptionDTO(
                id=p.id,
                medication_name=p.medication_name,
                date_issued=p.date_issued.strftime("%Y-%m-%d"),
            )
            for p in self.build_map().get(patient_id, [])
        ]
