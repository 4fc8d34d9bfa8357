"""
Update Profile Use Case.

Lets the logged-in user change their own name, email and password.
Failures are returned, not raised, so the form can show them and let
the user retry.
"""

from dataclasses import dataclass

from signcrm.application.dto.requests import UpdateProfileRequest
from signcrm.application.dto.responses import ProfileUpdateResponse
from signcrm.config import get_logger
from signcrm.core.entities.user import User
from signcrm.core.interfaces.user_store import IUserStore

logger = get_logger(__name__)

PASSWORDS_DO_NOT_MATCH = "New passwords do not match."
CURRENT_PASSWORD_REQUIRED = "Current password is required to save changes."
INCORRECT_PASSWORD = "Incorrect current password. Please try again."


@dataclass
class ProfileUpdateResult:
    """Outcome of a profile update."""

    success: bool
    user: User | None = None
    error: str | None = None


class UpdateProfileUseCase:
    """
    Use case for the profile form.

    Flow:
    1. New password and confirmation must match
    2. Current password must be given and correct
    3. Save name/email, and the password only when a new one was entered
    """

    def __init__(self, user_store: IUserStore):
        self._user_store = user_store

    def execute(self, user_id: str, request: UpdateProfileRequest) -> ProfileUpdateResult:
        if request.new_password and request.new_password != request.confirm_password:
            return ProfileUpdateResult(success=False, error=PASSWORDS_DO_NOT_MATCH)
        if not request.current_password:
            return ProfileUpdateResult(success=False, error=CURRENT_PASSWORD_REQUIRED)

        user = self._user_store.get_user(user_id)
        if user is None or user.password != request.current_password:
            logger.warning("profile_update_rejected", user_id=user_id)
            return ProfileUpdateResult(success=False, error=INCORRECT_PASSWORD)

        updated = self._user_store.update_user(
            user.model_copy(
                update={
                    "name": request.name,
                    "email": request.email,
                    "password": request.new_password or user.password,
                }
            )
        )
        logger.info(
            "profile_updated",
            user_id=user_id,
            password_changed=bool(request.new_password),
        )
        return ProfileUpdateResult(success=True, user=updated)

    @staticmethod
    def to_response(result: ProfileUpdateResult) -> ProfileUpdateResponse:
        return ProfileUpdateResponse(success=result.success, error=result.error)
