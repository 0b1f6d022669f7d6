"""认证相关数据结构"""

from typing import Optional

from .admin import AdminPublic
from .base import CamelModel


class LoginRequest(CamelModel):
    login_id: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(CamelModel):
    token: str
    admin: AdminPublic


class MessageResponse(CamelModel):
    message: str


class SessionRevokeResponse(CamelModel):
    admin_id: int
    deleted: int
