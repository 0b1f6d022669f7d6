"""应用配置模块

使用 Pydantic Settings 管理应用配置，支持从 .env 文件加载环境变量
"""

from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.duration import parse_duration


class Settings(BaseSettings):
    """应用配置类"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # JWT配置
    SECRET_KEY: str = "change-me-in-production-troupe-secret"
    ALGORITHM: str = "HS256"
    # 24h / 7d / 3600（秒）
    JWT_EXPIRES_IN: str = "24h"

    # 进程内会话（兼容旧客户端的 cookie 会话）
    SESSION_SECRET_KEY: str = "change-me-in-production-session-secret"
    SESSION_MAX_AGE: int = 86400

    # 应用配置
    APP_TITLE: str = "Troupe Admin API"
    APP_DESCRIPTION: str = "剧团管理后台 API：管理员认证与会话"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"

    # 保留的根管理员账号，只有系统管理员可以修改
    ROOT_ADMIN_LOGIN_ID: str = "admin"

    # 数据库配置
    DATABASE_URL: str = "sqlite:///./dev.db"
    ECHO_SQL: bool = False

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""

    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:3001"

    # 过期会话清理周期（分钟），0 表示交给外部 cron
    SESSION_CLEANUP_INTERVAL_MINUTES: int = 0

    @field_validator("JWT_EXPIRES_IN")
    @classmethod
    def _check_expires_in(cls, value: str) -> str:
        parse_duration(value)
        return value

    @property
    def token_lifetime(self):
        """令牌与数据库会话共用的有效期"""
        return parse_duration(self.JWT_EXPIRES_IN)

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


# 创建全局配置实例
settings = Settings()
