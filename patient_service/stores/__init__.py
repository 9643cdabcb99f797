from .patient_store import PatientStore, SqlAlchemyPatientStore

__all__ = ["PatientStore", "SqlAlchemyPatientStore"]
