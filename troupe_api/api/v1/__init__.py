from .admin import router as admin_router
from .admin_login_logs import router as admin_login_logs_router

__all__ = ["admin_router", "admin_login_logs_router"]
