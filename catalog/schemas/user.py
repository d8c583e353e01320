from datetime import datetime

from catalog.schemas.common import CamelModel


class UserCreate(CamelModel):
    username: str
    password: str


class User(CamelModel):
    id: str
    username: str
    password: str
    created_at: datetime


class AdminLogin(CamelModel):
    username: str
    password: str


class Token(CamelModel):
    token: str
    token_type: str = "bearer"
    username: str


class AdminInfo(CamelModel):
    username: str
    role: str = "admin"
