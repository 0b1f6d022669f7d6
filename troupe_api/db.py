"""troupe_api 数据库入口

engine、会话工厂与 get_db 的实现位于 database.connection，这里统一导出
"""

from .database.connection import engine, get_db, Base, SessionLocal

__all__ = ["engine", "get_db", "Base", "SessionLocal"]
