from .patient import Patient

__all__ = ["Patient"]
