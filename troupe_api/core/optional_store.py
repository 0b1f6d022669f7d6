"""可选子存储访问

admin_sessions 表属于可选基础设施：尚未迁移时登录与鉴权必须照常工作。
所有对该表的访问都经过 run_optional，由它统一区分
“表不存在”（记录警告并忽略）与其他数据库错误。
"""

import re
from typing import Callable, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# SQLite / MySQL / PostgreSQL 的“表不存在”错误文本；只匹配表级错误，列不存在等不算
_MISSING_TABLE_PATTERNS = re.compile(
    r"no such table"
    r"|table \S+ doesn't exist"
    r"|relation \S+ does not exist"
    r"|unknown table"
    r"|undefinedtable"
)

# MySQL ER_NO_SUCH_TABLE / ER_BAD_TABLE_ERROR
_MISSING_TABLE_MYSQL_CODES = (1146, 1051)


def is_missing_table_error(exc: BaseException) -> bool:
    """判断数据库异常是否由数据表不存在引起"""
    orig = getattr(exc, "orig", None)
    args = getattr(orig, "args", None)
    if args and args[0] in _MISSING_TABLE_MYSQL_CODES:
        return True
    pgcode = getattr(orig, "pgcode", None)
    if pgcode == "42P01":
        return True
    text = f"{type(orig).__name__ if orig is not None else ''} {exc}".lower()
    return _MISSING_TABLE_PATTERNS.search(text) is not None


def run_optional(
    db: Session,
    operation: Callable[[], T],
    description: str,
    default: Optional[T] = None,
    tolerate_errors: bool = False,
) -> Optional[T]:
    """执行一次针对可选子存储的操作

    - 表不存在：回滚会话，记录警告，返回 default
    - 其他数据库错误：tolerate_errors 为真时同样记录警告并返回 default，否则继续抛出
    - 非数据库异常原样抛出
    """
    try:
        return operation()
    except SQLAlchemyError as exc:
        db.rollback()
        if is_missing_table_error(exc):
            logger.warning("%s skipped: admin_sessions table not found, session management disabled", description)
            return default
        if tolerate_errors:
            logger.warning("%s failed: %s", description, exc)
            return default
        raise
