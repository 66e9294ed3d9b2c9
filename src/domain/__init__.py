from src.domain.models import TOP_CLASSES_LIMIT, ClassStatus, UserRole

__all__ = ["TOP_CLASSES_LIMIT", "ClassStatus", "UserRole"]
