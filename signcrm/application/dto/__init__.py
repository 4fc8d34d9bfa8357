"""Data transfer objects for the application layer."""

from signcrm.application.dto.requests import (
    CreateUserRequest,
    SaveCategoryRequest,
    UpdateProfileRequest,
)
from signcrm.application.dto.responses import (
    FinancialDashboardResponse,
    JobReportResponse,
    MonthSummaryResponse,
    ProfileUpdateResponse,
    TrendPointResponse,
)

__all__ = [
    # Requests
    "CreateUserRequest",
    "SaveCategoryRequest",
    "UpdateProfileRequest",
    # Responses
    "FinancialDashboardResponse",
    "JobReportResponse",
    "MonthSummaryResponse",
    "ProfileUpdateResponse",
    "TrendPointResponse",
]
