from .admin import (
    get_admin,
    get_admin_by_login_id,
    list_admins,
    create_admin,
    update_admin,
    soft_delete_admin,
    get_member,
)

from .admin_session import (
    get_session_by_token,
    create_session,
    delete_sessions_for_admin,
    delete_session_by_token,
    delete_session,
    touch_session,
    delete_expired_sessions,
)

from .admin_login_log import (
    UNKNOWN_ADMIN_ID,
    create_login_log,
    list_login_logs,
    get_login_log,
)

__all__ = [
    # Admin functions
    "get_admin",
    "get_admin_by_login_id",
    "list_admins",
    "create_admin",
    "update_admin",
    "soft_delete_admin",
    "get_member",

    # Session functions
    "get_session_by_token",
    "create_session",
    "delete_sessions_for_admin",
    "delete_session_by_token",
    "delete_session",
    "touch_session",
    "delete_expired_sessions",

    # Login log functions
    "UNKNOWN_ADMIN_ID",
    "create_login_log",
    "list_login_logs",
    "get_login_log",
]
