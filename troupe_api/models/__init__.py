"""数据库模型模块

定义所有 SQLAlchemy ORM 模型
"""

from .base import Base
from .member import Member
from .admin import Admin, AdminType
from .admin_session import AdminSession
from .admin_login_log import AdminLoginLog

__all__ = ["Base", "Member", "Admin", "AdminType", "AdminSession", "AdminLoginLog"]
