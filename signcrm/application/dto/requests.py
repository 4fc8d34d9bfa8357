"""Request DTOs.

Pydantic v2 models validating what the shell hands to use cases.
"""

from pydantic import BaseModel, Field

from signcrm.core.entities.user import Permissions, UserRole


class CreateUserRequest(BaseModel):
    """New user form. A default password is always assigned."""

    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, description="Login email")
    role: UserRole = Field(default=UserRole.SALES)
    permissions: Permissions | None = Field(
        default=None,
        description="Explicit permission flags; role defaults when omitted",
    )


class UpdateProfileRequest(BaseModel):
    """Profile form submitted by the logged-in user."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    current_password: str = Field(
        default="",
        description="Required to save any change",
    )
    new_password: str = Field(
        default="",
        description="Leave blank to keep the existing password",
    )
    confirm_password: str = Field(default="")


class SaveCategoryRequest(BaseModel):
    """Category form; ``color_name`` picks from the available palette."""

    name: str = Field(..., min_length=1)
    icon: str = Field(default="CubeIcon")
    color_name: str = Field(default="Blue", examples=["Blue", "Green", "Gray"])
