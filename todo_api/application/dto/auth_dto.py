from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserCredentials(BaseModel):
    """DTO for user registration request"""
    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(min_length=6)

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value):
        # Surrounding whitespace is dropped from the email, never from the password
        return value.strip() if isinstance(value, str) else value


class LoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value):
        return value.strip() if isinstance(value, str) else value


class LoginResponse(BaseModel):
    """DTO for successful login"""
    message: str = "Login successful"
    token: str


class CurrentUser(BaseModel):
    """Identity carried by a verified access token"""
    id: str
    email: str
