from .user_report import UserReport, UserReportType

__all__ = [
    "UserReport",
    "UserReportType",
]
