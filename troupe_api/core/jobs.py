"""进程内定时任务

SESSION_CLEANUP_INTERVAL_MINUTES > 0 时在应用进程内周期清理过期会话，
否则交给外部 cron 执行 scripts/session_cleanup_cron.py。
"""

from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from ..config.settings import settings
from ..utils.logger import get_logger
from .session_cleanup import cleanup_expired_sessions

logger = get_logger(__name__)

CLEANUP_JOB_ID = "cleanup_expired_sessions"


def run_cleanup_job() -> None:
    """调度器入口：异常只记录，不影响后续执行"""
    try:
        cleanup_expired_sessions()
    except Exception:
        logger.exception("Session cleanup job failed")


def create_scheduler(interval_minutes: Optional[int] = None) -> Optional[BackgroundScheduler]:
    """创建会话清理调度器，周期为 0 时返回 None"""
    minutes = settings.SESSION_CLEANUP_INTERVAL_MINUTES if interval_minutes is None else interval_minutes
    if minutes <= 0:
        logger.info("Session cleanup should be configured as a cron job: scripts/session_cleanup_cron.py")
        return None

    scheduler = BackgroundScheduler()
    scheduler.add_job(
        run_cleanup_job,
        trigger=IntervalTrigger(minutes=minutes),
        id=CLEANUP_JOB_ID,
        name="清理过期管理员会话",
        replace_existing=True,
        coalesce=True,
        max_instances=1,
    )
    return scheduler
