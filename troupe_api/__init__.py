"""剧团管理后台

提供统一的模块导入接口
"""

from . import (
    auth,
    config,
    crud,
    db,
    models,
    schemas,
    security,
    core,
)

from .config import settings
from .db import get_db, engine, Base
from .auth import create_access_token, decode_access_token, login, logout

__all__ = [
    "auth",
    "config",
    "crud",
    "db",
    "models",
    "schemas",
    "security",
    "core",
    "settings",
    "get_db",
    "engine",
    "Base",
    "create_access_token",
    "decode_access_token",
    "login",
    "logout",
]
