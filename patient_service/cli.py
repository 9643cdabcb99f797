import click
from flask import Flask

from patient_service.extensions import db


def register_cli(app: Flask) -> None:
    """
    Adds small helper CLI commands:
    - flask create-db: create tables using the configured database
    - flask drop-db: drop all tables (use with caution)
    - flask seed-patients: insert demo patients into an empty table
    """

    @app.cli.command("create-db")
    def create_db_command():
        """Create database tables if they do not exist."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("drop-db")
    def drop_db_command():
        """Drop all database tables. This is destructive."""
        db.drop_all()
        click.echo("Database tables dropped.")

    @app.cli.command("seed-patients")
    def seed_patients_command():
        """Insert demo patients if the table is empty."""
        from patient_service.seeds import seed_patients
        count = seed_patients()
        click.echo(f"Seeded {count} patient(s).")
