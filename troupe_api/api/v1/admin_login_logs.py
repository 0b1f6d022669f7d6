"""管理员登录日志API路由（只读）"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...database.connection import get_db
from ...errors import NotFoundError
from ..deps import require_admin

router = APIRouter(prefix="/admin-login-logs", tags=["admin-login-logs"], dependencies=[Depends(require_admin)])


@router.get("", response_model=List[schemas.AdminLoginLogRead])
def read_login_logs(
    admin_id: Optional[int] = Query(None, alias="adminId"),
    success: Optional[bool] = Query(None),
    db: Session = Depends(get_db),
):
    """获取登录日志列表，按时间倒序"""
    return crud.list_login_logs(db, admin_id=admin_id, success=success)


@router.get("/{log_id}", response_model=schemas.AdminLoginLogRead)
def read_login_log(log_id: int, db: Session = Depends(get_db)):
    """根据ID获取登录日志"""
    log = crud.get_login_log(db, log_id)
    if not log:
        raise NotFoundError("Admin login log not found")
    return log
