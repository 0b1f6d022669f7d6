"""过期会话清理

由外部 cron（scripts/session_cleanup_cron.py）或进程内调度器周期调用，
不在请求路径上执行。
"""

from typing import Optional

from sqlalchemy.orm import Session

from .. import crud
from ..database.connection import SessionLocal
from ..utils.logger import get_logger
from .optional_store import run_optional

logger = get_logger(__name__)


def cleanup_expired_sessions(db: Optional[Session] = None) -> int:
    """删除所有已过期的会话，返回删除数量

    表不存在或数据库出错时记录警告并返回 0；非数据库异常向上抛出。
    """
    own_session = db is None
    if own_session:
        db = SessionLocal()
    try:
        deleted = run_optional(
            db,
            lambda: crud.delete_expired_sessions(db),
            "expired session cleanup",
            default=0,
            tolerate_errors=True,
        )
        if deleted:
            logger.info("Cleaned up %s expired sessions", deleted)
        return deleted
    finally:
        if own_session:
            db.close()


def revoke_admin_sessions(db: Session, admin_id: int, best_effort: bool = False) -> int:
    """删除某管理员的全部会话（强制下线），返回删除数量

    best_effort 为真时数据库错误只记录警告并返回 0。
    """
    deleted = run_optional(
        db,
        lambda: crud.delete_sessions_for_admin(db, admin_id),
        f"revoke sessions of admin {admin_id}",
        default=0,
        tolerate_errors=best_effort,
    )
    logger.info("Deleted %s sessions for admin %s", deleted, admin_id)
    return deleted
