from app.models.db import TreatmentSession, UserPreference

__all__ = [
    "UserPreference",
    "TreatmentSession",
]
