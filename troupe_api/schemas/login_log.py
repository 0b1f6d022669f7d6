"""登录日志数据结构"""

from datetime import datetime
from typing import Optional

from .admin import AdminPublic
from .base import CamelModel


class AdminLoginLogRead(CamelModel):
    id: int
    admin_id: int
    success: bool
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    login_at: Optional[datetime] = None
    admin: Optional[AdminPublic] = None
