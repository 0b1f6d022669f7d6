"""管理员模型"""

import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .base import Base


class AdminType(str, enum.Enum):
    SYSTEM = "SYSTEM"
    NORMAL = "NORMAL"


class Admin(Base):
    """管理员表

    deleted_at 非空表示已软删除，认证与查询都不可见
    """
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    login_id = Column(String(64), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    admin_type = Column(
        Enum(AdminType, name="admintype", native_enum=False, length=16),
        nullable=False,
        default=AdminType.NORMAL,
    )
    member_id = Column(Integer, ForeignKey("members.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime, nullable=True, index=True)

    member = relationship("Member", lazy="joined")
    sessions = relationship("AdminSession", back_populates="admin", passive_deletes=True)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_system(self) -> bool:
        return self.admin_type == AdminType.SYSTEM
