"""Auth schemas: email + password, no tokens."""

from pydantic import BaseModel

from sharebox.models.user import User


class Credentials(BaseModel):
    email: str
    password: str


class UserInfo(BaseModel):
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(email=user.email)


class AuthResponse(BaseModel):
    message: str
    user: UserInfo
