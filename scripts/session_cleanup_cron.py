#!/usr/bin/env python3
"""Delete expired admin sessions.

Usage:
  python3 scripts/session_cleanup_cron.py

Intended for cron, e.g. hourly:
  0 * * * * cd /path/to/troupe-backend && python3 scripts/session_cleanup_cron.py >> /var/log/session-cleanup.log 2>&1

A missing admin_sessions table is not an error (0 sessions deleted).
Exit status is 1 only when the job fails unexpectedly.
"""
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from troupe_api.core.session_cleanup import cleanup_expired_sessions
from troupe_api.utils.logger import get_logger, setup_logging

logger = get_logger("session_cleanup_cron")


def main() -> int:
    setup_logging()
    try:
        logger.info("Starting session cleanup job...")
        deleted = cleanup_expired_sessions()
        logger.info("Session cleanup completed. Deleted %s expired sessions.", deleted)
        return 0
    except Exception:
        logger.exception("Session cleanup job failed")
        return 1


if __name__ == '__main__':
    sys.exit(main())
