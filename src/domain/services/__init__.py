from src.domain.services.class_review import ClassReviewError, ClassReviewService, decide_status
from src.domain.services.enrollment import EnrollmentService, PaymentOutcome, enrollment_update
from src.domain.services.users import UserExistsError, UserService, instructor_roster_pipeline

__all__ = [
    "ClassReviewError",
    "ClassReviewService",
    "EnrollmentService",
    "PaymentOutcome",
    "UserExistsError",
    "UserService",
    "decide_status",
    "enrollment_update",
    "instructor_roster_pipeline",
]
