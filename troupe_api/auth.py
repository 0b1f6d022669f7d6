"""认证模块

该模块处理管理员登录、JWT令牌签发与校验、数据库会话和进程内会话状态。

登录流程：校验凭据 -> 签发令牌 -> 删除旧会话 -> 写入新会话 -> 记录登录日志。
admin_sessions 表可以不存在，此时会话管理自动降级为只依赖 JWT。
"""

import uuid
from datetime import datetime, timedelta
from typing import Optional, Tuple

from fastapi import Request
from jose import jwt
from sqlalchemy.orm import Session

from . import crud
from .config.settings import settings
from .core.optional_store import run_optional
from .errors import BadRequestError, UnauthorizedError
from .models import Admin
from .security import verify_password
from .utils.logger import get_logger
from .utils.request import get_bearer_token, get_client_ip, get_user_agent

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def create_access_token(admin: Admin, expires_delta: Optional[timedelta] = None) -> Tuple[str, datetime]:
    """创建JWT访问令牌，返回 (令牌, 过期时间)"""
    issued_at = datetime.utcnow().replace(microsecond=0)
    expires_at = issued_at + (expires_delta or settings.token_lifetime)
    to_encode = {
        "adminId": admin.id,
        "loginId": admin.login_id,
        "iat": issued_at,
        "exp": expires_at,
        "jti": uuid.uuid4().hex,
    }
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt, expires_at


def decode_access_token(token: str) -> dict:
    """校验签名与过期时间，失败时抛出 jose.JWTError（过期为 ExpiredSignatureError）"""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def set_admin_session(request: Request, admin: Admin, token: str) -> None:
    """写入进程内会话，兼容依赖 cookie 会话的旧客户端"""
    if "session" not in request.scope:
        return
    request.session["admin_id"] = admin.id
    request.session["token"] = token
    request.session["login_id"] = admin.login_id


def clear_admin_session(request: Request) -> None:
    """清除进程内会话"""
    if "session" in request.scope:
        request.session.clear()


def _record_attempt(db: Session, request: Request, admin_id: int, success: bool) -> None:
    crud.create_login_log(
        db,
        admin_id=admin_id,
        success=success,
        ip_address=get_client_ip(request),
        user_agent=get_user_agent(request),
    )


def authenticate_admin(db: Session, request: Request, login_id: str, password: str) -> Admin:
    """校验管理员凭据，失败时写入失败日志并抛出 UnauthorizedError"""
    admin = crud.get_admin_by_login_id(db, login_id)

    if admin is None:
        _record_attempt(db, request, crud.UNKNOWN_ADMIN_ID, success=False)
        logger.info("login failed: unknown login id %r", login_id)
        raise UnauthorizedError(INVALID_CREDENTIALS)

    if admin.is_deleted:
        _record_attempt(db, request, admin.id, success=False)
        logger.info("login failed: admin %s is deleted", admin.id)
        raise UnauthorizedError(INVALID_CREDENTIALS)

    if not verify_password(password, admin.password_hash):
        _record_attempt(db, request, admin.id, success=False)
        logger.info("login failed: wrong password for admin %s", admin.id)
        raise UnauthorizedError(INVALID_CREDENTIALS)

    return admin


def login(db: Session, request: Request, login_id: Optional[str], password: Optional[str]) -> Tuple[str, Admin]:
    """验证用户凭据、签发令牌并建立会话"""
    if not login_id or not password:
        raise BadRequestError("Login ID and password are required")

    admin = authenticate_admin(db, request, login_id, password)
    token, expires_at = create_access_token(admin)

    # 单会话：先删除该管理员的所有旧会话
    run_optional(
        db,
        lambda: crud.delete_sessions_for_admin(db, admin.id),
        "delete existing sessions",
    )
    run_optional(
        db,
        lambda: crud.create_session(
            db,
            admin_id=admin.id,
            token=token,
            expires_at=expires_at,
            ip_address=get_client_ip(request),
            user_agent=get_user_agent(request),
        ),
        "create session",
    )

    set_admin_session(request, admin, token)
    _record_attempt(db, request, admin.id, success=True)
    logger.info("admin %s logged in from %s", admin.id, get_client_ip(request))
    return token, admin


def logout(db: Session, request: Request) -> None:
    """删除令牌对应的数据库会话并清除进程内会话；会话不存在也视为成功"""
    token = get_bearer_token(request)
    if token:
        run_optional(
            db,
            lambda: crud.delete_session_by_token(db, token),
            "delete session on logout",
        )
    clear_admin_session(request)
