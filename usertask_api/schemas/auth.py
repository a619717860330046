"""Authentication schemas for the UserTask API."""
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator

# bcrypt only hashes the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class RegisterRequest(BaseModel):
    """Registration request body."""
    name: str = Field(..., min_length=2, max_length=100)
    email: str
    password: str = Field(
        ...,
        min_length=6,
        max_length=100,
        description="Password must be at least 6 characters long.",
    )

    @field_validator("email")
    @classmethod
    def email_is_well_formed(cls, value: str) -> str:
        # Syntax check only; the address is stored exactly as sent
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email address: {str(e)}")
        return value

    @field_validator("password")
    @classmethod
    def password_fits_hash(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must not exceed {MAX_PASSWORD_BYTES} bytes.")
        return value


class LoginRequest(BaseModel):
    """Login request body."""
    email: str
    password: str


class TokenResponse(BaseModel):
    """Response containing the JWT after login."""
    token: str


class MessageResponse(BaseModel):
    message: str
