from __future__ import annotations

from enum import Enum

# Number of classes featured on the landing page
TOP_CLASSES_LIMIT = 6


class ClassStatus(str, Enum):
    """Review state of an instructor-submitted class."""

    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"


class UserRole(str, Enum):
    """Elevated roles; students carry no role field."""

    INSTRUCTOR = "instructor"
    ADMIN = "admin"
