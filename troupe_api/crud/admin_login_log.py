"""管理员登录日志数据操作（只追加、只读）"""

from typing import List, Optional

from sqlalchemy.orm import Session

from ..models import AdminLoginLog

UNKNOWN_ADMIN_ID = 0


def create_login_log(
    db: Session,
    admin_id: int,
    success: bool,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> AdminLoginLog:
    """记录一次登录尝试"""
    db_log = AdminLoginLog(
        admin_id=admin_id,
        success=success,
        ip_address=ip_address,
        user_agent=user_agent,
    )
    db.add(db_log)
    db.commit()
    db.refresh(db_log)
    return db_log


def list_login_logs(
    db: Session,
    admin_id: Optional[int] = None,
    success: Optional[bool] = None,
) -> List[AdminLoginLog]:
    """按时间倒序获取登录日志，可按管理员和成功与否过滤"""
    query = db.query(AdminLoginLog)
    if admin_id is not None:
        query = query.filter(AdminLoginLog.admin_id == admin_id)
    if success is not None:
        query = query.filter(AdminLoginLog.success == success)
    return query.order_by(AdminLoginLog.login_at.desc(), AdminLoginLog.id.desc()).all()


def get_login_log(db: Session, log_id: int) -> Optional[AdminLoginLog]:
    return db.query(AdminLoginLog).filter(AdminLoginLog.id == log_id).first()
