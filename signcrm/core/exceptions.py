"""
Domain exceptions for the SignCRM application.

Pricing, aggregation and stage auditing never raise; these cover the
application shell operations (catalog edits, job saves, user management).
"""

from typing import Any


class SignCRMError(Exception):
    """Base exception for all SignCRM errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for display in the shell."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(SignCRMError):
    """Base exception for store operations."""

    pass


class JobNotFoundError(StorageError):
    """Job not found in the job store."""

    def __init__(self, job_id: str):
        super().__init__(
            f"Job not found: {job_id}",
            code="JOB_NOT_FOUND",
            details={"job_id": job_id},
        )


class CostItemNotFoundError(StorageError):
    """Cost item not found in the catalog."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Cost item not found: {item_id}",
            code="COST_ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


class CategoryNotFoundError(StorageError):
    """Item category not found in the catalog."""

    def __init__(self, category_id: str):
        super().__init__(
            f"Category not found: {category_id}",
            code="CATEGORY_NOT_FOUND",
            details={"category_id": category_id},
        )


class FixedCostNotFoundError(StorageError):
    """Company fixed cost not found."""

    def __init__(self, fixed_cost_id: str):
        super().__init__(
            f"Fixed cost not found: {fixed_cost_id}",
            code="FIXED_COST_NOT_FOUND",
            details={"fixed_cost_id": fixed_cost_id},
        )


class UserNotFoundError(StorageError):
    """User not found in the user store."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class DuplicateRecordError(StorageError):
    """A record with this id is already stored."""

    def __init__(self, record_id: str):
        super().__init__(
            f"Record already exists: {record_id}",
            code="DUPLICATE_RECORD",
            details={"record_id": record_id},
        )


# Catalog Exceptions
class CategoryInUseError(SignCRMError):
    """Category still has cost items assigned to it."""

    def __init__(self, category_id: str, item_count: int):
        super().__init__(
            f"Category {category_id} still has {item_count} item(s) assigned",
            code="CATEGORY_IN_USE",
            details={"category_id": category_id, "item_count": item_count},
        )


# Authorization Exceptions
class PermissionDeniedError(SignCRMError):
    """Acting user may not perform the requested action."""

    def __init__(
        self,
        user_id: str,
        module: str,
        action: str,
        resource_id: str | None = None,
    ):
        super().__init__(
            f"User {user_id} may not {action} {module}"
            + (f" ({resource_id})" if resource_id else ""),
            code="PERMISSION_DENIED",
            details={
                "user_id": user_id,
                "module": module,
                "action": action,
                "resource_id": resource_id,
            },
        )


class SelfDeletionError(SignCRMError):
    """A user tried to delete their own account."""

    def __init__(self, user_id: str):
        super().__init__(
            "You cannot delete your own account.",
            code="SELF_DELETION",
            details={"user_id": user_id},
        )


# Validation Exceptions
class ValidationError(SignCRMError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


class TooManyPaymentsError(ValidationError):
    """More payment records than the job form has slots for."""

    def __init__(self, count: int, max_slots: int):
        super().__init__(
            field="payments",
            message=f"{count} payments recorded, at most {max_slots} allowed",
            value=count,
        )
        self.details.update({"count": count, "max_slots": max_slots})


class ConfigurationError(SignCRMError):
    """Configuration error."""

    pass
