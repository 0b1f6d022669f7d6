"""管理员数据操作

已软删除（deleted_at 非空）的管理员对查询不可见，
get_admin_by_login_id 例外：登录日志需要区分“账号不存在”和“账号已删除”。
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models import Admin, AdminType, Member
from ..security import get_password_hash


def get_admin(db: Session, admin_id: int, include_deleted: bool = False) -> Optional[Admin]:
    """根据ID获取管理员"""
    query = db.query(Admin).filter(Admin.id == admin_id)
    if not include_deleted:
        query = query.filter(Admin.deleted_at.is_(None))
    return query.first()


def get_admin_by_login_id(db: Session, login_id: str) -> Optional[Admin]:
    """根据登录ID获取管理员（包括已软删除的）"""
    return db.query(Admin).filter(Admin.login_id == login_id).first()


def list_admins(db: Session) -> List[Admin]:
    """获取所有未删除的管理员"""
    return db.query(Admin).filter(Admin.deleted_at.is_(None)).order_by(Admin.id).all()


def create_admin(
    db: Session,
    login_id: str,
    password: str,
    name: str,
    admin_type: AdminType = AdminType.NORMAL,
    member_id: Optional[int] = None,
) -> Admin:
    """创建管理员账户"""
    db_admin = Admin(
        login_id=login_id,
        password_hash=get_password_hash(password),
        name=name,
        admin_type=admin_type,
        member_id=member_id,
    )
    db.add(db_admin)
    db.commit()
    db.refresh(db_admin)
    return db_admin


def update_admin(db: Session, admin: Admin, update_data: dict) -> Admin:
    """更新管理员信息，password 字段会被重新哈希"""
    update_data = dict(update_data)
    password = update_data.pop("password", None)
    if password:
        admin.password_hash = get_password_hash(password)
    for field, value in update_data.items():
        setattr(admin, field, value)
    db.commit()
    db.refresh(admin)
    return admin


def soft_delete_admin(db: Session, admin: Admin) -> Admin:
    """软删除管理员"""
    admin.deleted_at = datetime.utcnow()
    db.commit()
    db.refresh(admin)
    return admin


def get_member(db: Session, member_id: int) -> Optional[Member]:
    """根据ID获取团员"""
    return db.query(Member).filter(Member.id == member_id).first()
