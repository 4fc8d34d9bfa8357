"""Unit tests for the exception hierarchy."""

from signcrm.core.exceptions import (
    CategoryInUseError,
    ConfigurationError,
    DuplicateRecordError,
    JobNotFoundError,
    PermissionDeniedError,
    SelfDeletionError,
    SignCRMError,
    StorageError,
    TooManyPaymentsError,
    UserNotFoundError,
    ValidationError,
)


class TestSignCRMError:
    def test_default_code_is_class_name(self):
        err = SignCRMError("boom")
        assert err.code == "SignCRMError"
        assert err.details == {}
        assert str(err) == "boom"

    def test_to_dict(self):
        err = SignCRMError("boom", code="X", details={"a": 1})
        assert err.to_dict() == {"error": "X", "message": "boom", "details": {"a": 1}}


class TestStorageErrors:
    def test_not_found_errors_are_storage_errors(self):
        assert isinstance(JobNotFoundError("job-1"), StorageError)
        assert isinstance(UserNotFoundError("user-1"), StorageError)

    def test_job_not_found_details(self):
        err = JobNotFoundError("job-7")
        assert err.code == "JOB_NOT_FOUND"
        assert err.details["job_id"] == "job-7"

    def test_duplicate_record_is_storage_error(self):
        err = DuplicateRecordError("job-1")
        assert isinstance(err, StorageError)
        assert err.code == "DUPLICATE_RECORD"
        assert err.details == {"record_id": "job-1"}


class TestDomainErrors:
    def test_category_in_use_carries_count(self):
        err = CategoryInUseError("cat-1", 4)
        assert err.code == "CATEGORY_IN_USE"
        assert err.details == {"category_id": "cat-1", "item_count": 4}

    def test_permission_denied_message(self):
        err = PermissionDeniedError("user-2", "jobs", "delete", resource_id="job-1")
        assert "user-2" in err.message
        assert "job-1" in err.message
        assert err.details["action"] == "delete"

    def test_self_deletion(self):
        err = SelfDeletionError("user-1")
        assert err.message == "You cannot delete your own account."

    def test_too_many_payments_is_validation_error(self):
        err = TooManyPaymentsError(4, 3)
        assert isinstance(err, ValidationError)
        assert err.details["field"] == "payments"
        assert err.details["max_slots"] == 3

    def test_configuration_error_uses_class_name_code(self):
        err = ConfigurationError("Invalid settings")
        assert err.code == "ConfigurationError"
        assert isinstance(err, SignCRMError)
