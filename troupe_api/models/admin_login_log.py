"""管理员登录日志模型

只追加不修改；admin_id 为 0 表示登录账号不存在，因此不设外键
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .base import Base


class AdminLoginLog(Base):
    """管理员登录日志表"""
    __tablename__ = "admin_login_logs"

    id = Column(Integer, primary_key=True, index=True)
    admin_id = Column(Integer, nullable=False, index=True)
    success = Column(Boolean, nullable=False, default=False)
    ip_address = Column(String(64), nullable=True)
    user_agent = Column(String(512), nullable=True)
    login_at = Column(DateTime, server_default=func.now(), index=True)

    admin = relationship(
        "Admin",
        primaryjoin="foreign(AdminLoginLog.admin_id) == Admin.id",
        viewonly=True,
        lazy="joined",
    )
