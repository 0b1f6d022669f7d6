"""数据库状态检查

启动时调用，只记录日志，不阻止服务启动
"""

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError

from ..database.connection import engine
from ..models import AdminSession
from .logger import get_logger

logger = get_logger(__name__)


def check_connection(bind=None) -> bool:
    """执行 SELECT 1 检查数据库连接"""
    bind = bind or engine
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except SQLAlchemyError as exc:
        logger.error("Database connection failed: %s", exc)
        return False


def check_admin_session_table(bind=None) -> bool:
    """检查 admin_sessions 表是否存在"""
    bind = bind or engine
    try:
        exists = inspect(bind).has_table(AdminSession.__tablename__)
    except SQLAlchemyError as exc:
        logger.warning("Could not check AdminSession table: %s", exc)
        return False

    if exists:
        logger.info("AdminSession table exists")
    else:
        logger.warning("AdminSession table does not exist, session management falls back to JWT only")
    return exists
