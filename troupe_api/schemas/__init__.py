"""API数据模型模块

定义所有 Pydantic 模型（请求/响应结构体）
"""

from .admin import MemberBrief, AdminPublic, AdminRead, AdminCreate, AdminUpdate
from .auth import LoginRequest, LoginResponse, MessageResponse, SessionRevokeResponse
from .login_log import AdminLoginLogRead

__all__ = [
    "MemberBrief",
    "AdminPublic",
    "AdminRead",
    "AdminCreate",
    "AdminUpdate",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "SessionRevokeResponse",
    "AdminLoginLogRead",
]
