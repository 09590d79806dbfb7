# 📄 File: snaptheplant/modules/user_management/presentation/api/schemas/auth_schemas.py
# 🧭 Purpose (Layman Explanation):
# Checks what people type when signing up or logging in (long enough username and
# password, matching password confirmation, a real-looking email).
# 🧪 Purpose (Technical Summary):
# Pydantic request schemas for registration and login with field constraints and a
# cross-field password confirmation check.
# 🔗 Dependencies:
# pydantic (EmailStr via email-validator), snaptheplant.shared.core.schemas
# 🔄 Connected Modules / Calls From:
# snaptheplant.modules.user_management.presentation.api.v1.auth

from typing import Optional

from pydantic import EmailStr, Field, model_validator

from snaptheplant.shared.core.schemas import APIModel


class RegisterRequest(APIModel):
    """Registration form."""
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=128)
    password_confirm: str
    email: EmailStr
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)

    @model_validator(mode="after")
    def passwords_match(self) -> "RegisterRequest":
        if self.password != self.password_confirm:
            raise ValueError("Passwords don't match")
        return self


class LoginRequest(APIModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
