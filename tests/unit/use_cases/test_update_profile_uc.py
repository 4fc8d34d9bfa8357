"""Tests for UpdateProfileUseCase."""

import pytest

from signcrm.application.dto.requests import UpdateProfileRequest
from signcrm.application.use_cases.update_profile import (
    CURRENT_PASSWORD_REQUIRED,
    INCORRECT_PASSWORD,
    PASSWORDS_DO_NOT_MATCH,
    UpdateProfileUseCase,
)


@pytest.fixture
def use_case(stores):
    return UpdateProfileUseCase(stores.users)


def _request(**overrides) -> UpdateProfileRequest:
    data = {
        "name": "Sales Lead",
        "email": "lead@signgroup.com",
        "current_password": "password123",
    }
    data.update(overrides)
    return UpdateProfileRequest(**data)


class TestUpdateProfileUseCase:
    def test_updates_details_keeps_password(self, use_case, stores):
        result = use_case.execute("user-2", _request())
        assert result.success
        stored = stores.users.get_user("user-2")
        assert stored.name == "Sales Lead"
        assert stored.email == "lead@signgroup.com"
        assert stored.password == "password123"

    def test_changes_password(self, use_case, stores):
        result = use_case.execute(
            "user-2", _request(new_password="s3cret", confirm_password="s3cret")
        )
        assert result.success
        assert stores.users.get_user("user-2").password == "s3cret"

    def test_wrong_current_password(self, use_case, stores):
        result = use_case.execute("user-2", _request(current_password="nope"))
        assert not result.success
        assert result.error == INCORRECT_PASSWORD
        assert stores.users.get_user("user-2").name == "Sales Person"

    def test_missing_current_password(self, use_case):
        result = use_case.execute("user-2", _request(current_password=""))
        assert result.error == CURRENT_PASSWORD_REQUIRED

    def test_mismatched_confirmation(self, use_case):
        result = use_case.execute(
            "user-2", _request(new_password="a", confirm_password="b")
        )
        assert result.error == PASSWORDS_DO_NOT_MATCH

    def test_unknown_user_fails_like_bad_password(self, use_case):
        assert use_case.execute("user-404", _request()).error == INCORRECT_PASSWORD

    def test_to_response(self, use_case):
        response = UpdateProfileUseCase.to_response(
            use_case.execute("user-2", _request(current_password="nope"))
        )
        assert response.model_dump() == {"success": False, "error": INCORRECT_PASSWORD}
