"""CLI commands for patients and prescriptions."""

from __future__ import annotations

from datetime import datetime

import click

from stockroom.application.prescriptions import PrescriptionsByPatientHandler
from stockroom.application.seed import seed_health
from stockroom.application.show_patients import ShowPatientsHandler
from stockroom.infrastructure.bootstrap import repository


def _seeded():
    patients = repository()
    prescriptions = repository()
    seed_health(patients, prescriptions, datetime.now())
    return patients, prescriptions


@click.command("patients")
def health_patients() -> None:
    """List all patients."""
    patients, _ = _seeded()
    click.echo("All Patients:")
    for p in ShowPatientsHandler(patients).handle():
        click.echo(f"ID: {p.id}, Name: {p.name}, Age: {p.age}, Gender: {p.gender}")


@click.command("prescriptions")
@click.option("--patient", "patient_id", required=True, type=int, help="Patient ID.")
def health_prescriptions(patient_id: int) -> None:
    """Show the prescriptions issued to one patient."""
    _, prescriptions = _seeded()
    lines = PrescriptionsByPatientHandler(prescriptions).handle(patient_id)

    if not lines:
        click.echo(f"No prescriptions found for patient ID {patient_id}.")
        return

    click.echo(f"Prescriptions for patient ID {patient_id}:")
    for p in lines:
        click.echo(
            f"Prescription ID: {p.id}, Medication: {p.medication_name}, "
            f"Date Issued: {p.date_issued}"
        )
