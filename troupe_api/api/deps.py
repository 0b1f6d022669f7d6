"""接口依赖：令牌校验与权限控制

get_current_admin 挂在所有受保护路由上：
1. 读取 Bearer 令牌（或进程内会话中的令牌）
2. 校验 JWT 签名与过期时间
3. 存在数据库会话时按会话校验；admin_sessions 表缺失或无对应行时退回到仅凭 JWT 认证
"""

from datetime import datetime

from fastapi import Depends, Request
from jose import ExpiredSignatureError, JWTError
from sqlalchemy.orm import Session

from .. import crud
from ..auth import decode_access_token
from ..core.optional_store import run_optional
from ..database.connection import get_db
from ..errors import ForbiddenError, UnauthorizedError
from ..models import Admin
from ..utils.logger import get_logger
from ..utils.request import get_bearer_token

logger = get_logger(__name__)


def _attach(request: Request, admin: Admin) -> Admin:
    request.state.admin = admin
    request.state.admin_id = admin.id
    return admin


def get_current_admin(request: Request, db: Session = Depends(get_db)) -> Admin:
    """校验令牌并返回当前管理员"""
    token = get_bearer_token(request)
    if not token:
        raise UnauthorizedError("No token provided")

    try:
        payload = decode_access_token(token)
    except ExpiredSignatureError:
        run_optional(
            db,
            lambda: crud.delete_session_by_token(db, token),
            "delete session of expired token",
            tolerate_errors=True,
        )
        raise UnauthorizedError("Invalid or expired token")
    except JWTError:
        raise UnauthorizedError("Invalid or expired token")

    admin_id = payload.get("adminId")
    if not isinstance(admin_id, int):
        raise UnauthorizedError("Invalid or expired token")

    session = run_optional(
        db,
        lambda: crud.get_session_by_token(db, token),
        "session lookup",
    )

    if session is not None:
        if datetime.utcnow() > session.expires_at:
            run_optional(
                db,
                lambda: crud.delete_session(db, session),
                "delete expired session",
                tolerate_errors=True,
            )
            raise UnauthorizedError("Session expired")

        if session.admin_id != admin_id:
            raise UnauthorizedError("Session and token mismatch")

        admin = session.admin
        if admin is None or admin.is_deleted:
            raise UnauthorizedError("Admin not found")

        run_optional(
            db,
            lambda: crud.touch_session(db, session),
            "update session last access",
            tolerate_errors=True,
        )
        return _attach(request, admin)

    # 没有数据库会话：仅凭 JWT 认证（兼容会话表未部署的环境）
    admin = crud.get_admin(db, admin_id)
    if admin is None:
        raise UnauthorizedError("Admin not found")
    return _attach(request, admin)


def require_admin(request: Request, admin: Admin = Depends(get_current_admin)) -> Admin:
    """要求请求已携带认证过的管理员"""
    if getattr(request.state, "admin", None) is None:
        raise UnauthorizedError("Admin authentication required")
    return admin


def require_system_admin(admin: Admin = Depends(require_admin)) -> Admin:
    """要求系统管理员权限"""
    if not admin.is_system:
        raise ForbiddenError("System admin access required")
    return admin
