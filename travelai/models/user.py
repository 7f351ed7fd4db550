from pydantic import BaseModel, Field, model_validator
from typing import Optional, Any


class UserData(BaseModel):
    uid: str
    email: str
    firstName: str = ""
    lastName: str = ""
    displayName: str = ""
    createdAt: Optional[Any] = None


class SignupRequest(BaseModel):
    firstName: str = ""
    lastName: str = ""
    email: str = ""
    password: str = ""
    confirmPassword: str = ""

    @model_validator(mode="after")
    def check_fields(self):
        if not (self.firstName and self.lastName and self.email and self.password):
            raise ValueError("Please fill in all fields")
        if self.password != self.confirmPassword:
            raise ValueError("Passwords do not match")
        if len(self.password) < 6:
            raise ValueError("Password must be at least 6 characters long")
        return self


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""

    @model_validator(mode="after")
    def check_fields(self):
        if not self.email or not self.password:
            raise ValueError("Please fill in all fields")
        return self


class AuthResponse(BaseModel):
    success: bool
    user: Optional[UserData] = None
    idToken: Optional[str] = None
    message: str = Field("", description="User-facing status message")
