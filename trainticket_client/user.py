"""User service: registered users of the ticketing system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .client import ApiResponse, ServiceClient, json_object

_USERS = "/api/v1/userservice/users"


@dataclass
class User:
    """A user account with its identity document and e-mail."""

    user_id: str = ""
    user_name: str = ""
    password: str = ""
    gender: int = 0
    document_type: int = 0
    document_num: str = ""
    email: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "userName": self.user_name,
            "password": self.password,
            "gender": self.gender,
            "documentType": self.document_type,
            "documentNum": self.document_num,
            "email": self.email,
        }

    @classmethod
    def from_dict(cls, payload: Any) -> "User":
        fields = json_object(payload)
        return cls(
            user_id=str(fields.get("userId") or ""),
            user_name=str(fields.get("userName") or ""),
            password=str(fields.get("password") or ""),
            gender=int(fields.get("gender") or 0),
            document_type=int(fields.get("documentType") or 0),
            document_num=str(fields.get("documentNum") or ""),
            email=str(fields.get("email") or ""),
        )


@dataclass
class UserResponse(ApiResponse):
    data: User = field(default_factory=User)

    @classmethod
    def _parse_data(cls, raw: Any) -> User:
        return User.from_dict(raw)


@dataclass
class UsersResponse(ApiResponse):
    data: list[User] = field(default_factory=list)

    @classmethod
    def _parse_data(cls, raw: Any) -> list[User]:
        return [User.from_dict(item) for item in raw or []]


@dataclass
class UserService:
    """Operations of the user service."""

    client: ServiceClient

    def get_all_users(self) -> UsersResponse:
        return self.client.call("GET", _USERS, UsersResponse)

    def get_user_by_name(self, user_name: str) -> UserResponse:
        return self.client.call("GET", f"{_USERS}/{user_name}", UserResponse)

    def get_user_by_id(self, user_id: str) -> UserResponse:
        return self.client.call("GET", f"{_USERS}/id/{user_id}", UserResponse)

    def register_user(self, user: User) -> UserResponse:
        return self.client.call("POST", f"{_USERS}/register", UserResponse, user)

    def delete_user(self, user_id: str) -> UserResponse:
        return self.client.call("DELETE", f"{_USERS}/{user_id}", UserResponse)

    def update_user(self, user: User) -> UserResponse:
        return self.client.call("PUT", _USERS, UserResponse, user)