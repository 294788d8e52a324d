from enum import Enum

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    requester = "requester"
    approver = "approver"


class Identity(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    role: Role


class Credentials(BaseModel):
    email: str
    password: str
    role: Role = Role.requester
    name: str | None = None


class LoginRequest(BaseModel):
    email: str
    password: str
    role: Role = Role.requester


class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str
    role: Role = Role.requester
