"""管理员数据结构定义"""

from datetime import datetime
from typing import Optional

from ..models import AdminType
from .base import CamelModel


class MemberBrief(CamelModel):
    """管理员关联的团员档案"""
    id: int
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None


class AdminPublic(CamelModel):
    """管理员公开信息（登录响应与 /me）"""
    id: int
    login_id: str
    name: str
    admin_type: AdminType
    member: Optional[MemberBrief] = None


class AdminRead(AdminPublic):
    """管理员详细信息"""
    member_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AdminCreate(CamelModel):
    """创建管理员时的模型，必填项在路由中校验"""
    login_id: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    member_id: Optional[int] = None


class AdminUpdate(CamelModel):
    """更新管理员时的模型"""
    name: Optional[str] = None
    admin_type: Optional[AdminType] = None
    member_id: Optional[int] = None
    password: Optional[str] = None
