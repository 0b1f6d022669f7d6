"""管理员API路由

登录、登出为公开接口，其余接口需要管理员令牌
"""

from typing import List

from fastapi import APIRouter, Body, Depends, Request
from sqlalchemy.orm import Session

from ... import auth as app_auth
from ... import crud, schemas
from ...config.settings import settings
from ...core.session_cleanup import revoke_admin_sessions
from ...database.connection import get_db
from ...errors import BadRequestError, ConflictError, ForbiddenError, NotFoundError
from ...models import Admin, AdminType
from ..deps import require_admin, require_system_admin

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_target_admin(db: Session, admin_id: int) -> Admin:
    admin = crud.get_admin(db, admin_id)
    if admin is None:
        raise NotFoundError("Admin not found")
    return admin


def _guard_root_admin(target: Admin, current: Admin, action: str) -> None:
    """保留的根管理员账号只允许系统管理员修改或删除"""
    if target.login_id == settings.ROOT_ADMIN_LOGIN_ID and not current.is_system:
        raise ForbiddenError(f"Only system administrators can {action} the admin account")


def _check_member(db: Session, member_id) -> None:
    if member_id is not None and crud.get_member(db, member_id) is None:
        raise NotFoundError("Member not found")


@router.post("/login", response_model=schemas.LoginResponse)
def login(
    request: Request,
    payload: schemas.LoginRequest = Body(default=None),
    db: Session = Depends(get_db),
):
    """管理员登录：签发令牌并建立会话（同一管理员只保留一个会话）"""
    payload = payload or schemas.LoginRequest()
    token, admin = app_auth.login(db, request, payload.login_id, payload.password)
    return schemas.LoginResponse(token=token, admin=schemas.AdminPublic.model_validate(admin))


@router.post("/logout", response_model=schemas.MessageResponse)
def logout(request: Request, db: Session = Depends(get_db)):
    """管理员登出，会话不存在时同样返回成功"""
    app_auth.logout(db, request)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=schemas.AdminPublic)
def read_me(current_admin: Admin = Depends(require_admin), db: Session = Depends(get_db)):
    """获取当前登录的管理员"""
    admin = crud.get_admin(db, current_admin.id)
    if admin is None:
        raise NotFoundError("Admin not found")
    return admin


@router.get("", response_model=List[schemas.AdminRead])
def read_admins(current_admin: Admin = Depends(require_admin), db: Session = Depends(get_db)):
    """获取管理员列表"""
    return crud.list_admins(db)


@router.post("", response_model=schemas.AdminRead, status_code=201)
def create_admin(
    payload: schemas.AdminCreate,
    current_admin: Admin = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """创建管理员，新账号一律为普通管理员"""
    if not payload.login_id or not payload.password or not payload.name:
        raise BadRequestError("Login ID, password, and name are required")
    if crud.get_admin_by_login_id(db, payload.login_id) is not None:
        raise ConflictError("Login ID already exists")
    _check_member(db, payload.member_id)

    return crud.create_admin(
        db,
        login_id=payload.login_id,
        password=payload.password,
        name=payload.name,
        admin_type=AdminType.NORMAL,
        member_id=payload.member_id,
    )


@router.get("/{admin_id}", response_model=schemas.AdminRead)
def read_admin(admin_id: int, current_admin: Admin = Depends(require_admin), db: Session = Depends(get_db)):
    """根据ID获取管理员"""
    return _get_target_admin(db, admin_id)


@router.put("/{admin_id}", response_model=schemas.AdminRead)
def update_admin(
    admin_id: int,
    payload: schemas.AdminUpdate,
    current_admin: Admin = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """更新管理员信息"""
    target = _get_target_admin(db, admin_id)
    _guard_root_admin(target, current_admin, "modify")

    fields = payload.model_dump(exclude_unset=True)
    update_data = {}
    if fields.get("name"):
        update_data["name"] = fields["name"]
    if fields.get("admin_type"):
        admin_type = fields["admin_type"]
        if target.login_id == settings.ROOT_ADMIN_LOGIN_ID and admin_type != AdminType.SYSTEM:
            raise BadRequestError("Cannot change admin account type")
        if admin_type != target.admin_type and not current_admin.is_system:
            raise ForbiddenError("System admin access required")
        update_data["admin_type"] = admin_type
    if "member_id" in fields:
        _check_member(db, fields["member_id"])
        update_data["member_id"] = fields["member_id"]
    if fields.get("password"):
        update_data["password"] = fields["password"]

    return crud.update_admin(db, target, update_data)


@router.delete("/{admin_id}", response_model=schemas.MessageResponse)
def delete_admin(admin_id: int, current_admin: Admin = Depends(require_admin), db: Session = Depends(get_db)):
    """软删除管理员并使其会话失效"""
    target = _get_target_admin(db, admin_id)
    _guard_root_admin(target, current_admin, "delete")

    crud.soft_delete_admin(db, target)
    # 账号已删除，会话清理失败不影响结果
    revoke_admin_sessions(db, admin_id, best_effort=True)
    return {"message": "Admin deleted successfully"}


@router.delete("/{admin_id}/sessions", response_model=schemas.SessionRevokeResponse)
def revoke_sessions(
    admin_id: int,
    current_admin: Admin = Depends(require_system_admin),
    db: Session = Depends(get_db),
):
    """强制下线：删除某管理员的全部会话（仅系统管理员）"""
    if crud.get_admin(db, admin_id, include_deleted=True) is None:
        raise NotFoundError("Admin not found")
    deleted = revoke_admin_sessions(db, admin_id)
    return schemas.SessionRevokeResponse(admin_id=admin_id, deleted=deleted)
