from pydantic import BaseModel


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    email: str


class RegisterResponse(BaseModel):
    """DTO for registration response"""
    message: str = "Successful!"
    result: UserResponse
