"""管理员会话数据操作

这些函数直接访问 admin_sessions 表；表可能不存在，
调用方需要通过 core.optional_store.run_optional 包装。
"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from ..models import AdminSession


def get_session_by_token(db: Session, token: str) -> Optional[AdminSession]:
    return db.query(AdminSession).filter(AdminSession.token == token).first()


def create_session(
    db: Session,
    admin_id: int,
    token: str,
    expires_at: datetime,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> AdminSession:
    now = datetime.utcnow()
    db_session = AdminSession(
        admin_id=admin_id,
        token=token,
        ip_address=ip_address,
        user_agent=user_agent,
        created_at=now,
        last_accessed_at=now,
        expires_at=expires_at,
    )
    db.add(db_session)
    db.commit()
    db.refresh(db_session)
    return db_session


def delete_sessions_for_admin(db: Session, admin_id: int) -> int:
    """删除某管理员的全部会话，返回删除行数"""
    deleted = db.query(AdminSession).filter(AdminSession.admin_id == admin_id).delete(synchronize_session=False)
    db.commit()
    return deleted


def delete_session_by_token(db: Session, token: str) -> int:
    deleted = db.query(AdminSession).filter(AdminSession.token == token).delete(synchronize_session=False)
    db.commit()
    return deleted


def delete_session(db: Session, db_session: AdminSession) -> None:
    db.delete(db_session)
    db.commit()


def touch_session(db: Session, db_session: AdminSession) -> AdminSession:
    """刷新最后访问时间"""
    db_session.last_accessed_at = datetime.utcnow()
    db.commit()
    return db_session


def delete_expired_sessions(db: Session, now: Optional[datetime] = None) -> int:
    """删除 expires_at 早于当前时间的会话，返回删除行数"""
    now = now or datetime.utcnow()
    deleted = db.query(AdminSession).filter(AdminSession.expires_at < now).delete(synchronize_session=False)
    db.commit()
    return deleted
