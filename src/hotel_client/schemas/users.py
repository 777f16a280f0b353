from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from hotel_client.models.users import User, UserRole


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class RegisterRequest(BaseModel):
    name: str = Field(min_length=2, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6)
    phone: Optional[str] = Field(default=None, pattern=r"^[0-9]{10}$")


class ProfileUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    phone: Optional[str] = Field(default=None, pattern=r"^[0-9]{10}$")


class UserPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(alias="_id")
    name: str = ""
    email: str
    phone: Optional[str] = None
    role: UserRole = UserRole.CUSTOMER

    @model_validator(mode="before")
    @classmethod
    def accept_plain_id(cls, data):
        if isinstance(data, dict) and "_id" not in data and "id" in data:
            data = {**data, "_id": data["id"]}
        return data

    def to_domain(self) -> User:
        return User(
            user_id=self.id,
            email=self.email,
            name=self.name,
            role=self.role,
            phone=self.phone,
        )


class AuthResponse(BaseModel):
    token: str
    user: UserPayload
