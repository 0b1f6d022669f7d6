"""FastAPI主应用入口

剧团管理后台 REST API：
- 管理员登录 / 登出，JWT + 数据库会话（单会话）
- 管理员账号管理与登录日志查询
- 统一错误响应 {"success": false, "error": ...}
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from .api.v1 import admin_login_logs_router, admin_router
from .config.settings import settings
from .core.jobs import create_scheduler
from .errors import register_exception_handlers
from .utils import db_check
from .utils.logger import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)

# 创建FastAPI应用实例
app = FastAPI(title=settings.APP_TITLE, description=settings.APP_DESCRIPTION, version=settings.APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)

# 进程内会话，兼容仍使用 cookie 会话的旧客户端
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET_KEY,
    session_cookie="session",
    max_age=settings.SESSION_MAX_AGE,
    https_only=settings.is_production,
)

register_exception_handlers(app)

# 挂载API路由
app.include_router(admin_router, prefix="/api/v1")
app.include_router(admin_login_logs_router, prefix="/api/v1")

scheduler = None


@app.get("/health")
def health():
    """服务状态检查"""
    return {"success": True, "message": "Server is running"}


@app.on_event("startup")
def startup_event():
    """启动时检查数据库并按配置启动会话清理任务"""
    global scheduler
    logger.info("Server starting: %s %s (%s)", settings.APP_TITLE, settings.APP_VERSION, settings.ENVIRONMENT)
    if db_check.check_connection():
        db_check.check_admin_session_table()

    scheduler = create_scheduler()
    if scheduler is not None:
        scheduler.start()
        logger.info("Session cleanup scheduler started (every %s min)", settings.SESSION_CLEANUP_INTERVAL_MINUTES)


@app.on_event("shutdown")
def shutdown_event():
    if scheduler is not None and scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Session cleanup scheduler stopped")
