"""请求信息提取"""

from typing import Optional

from fastapi import Request


def get_client_ip(request: Request) -> str:
    """获取客户端IP：X-Forwarded-For 第一跳 > X-Real-IP > 连接地址"""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop

    real_ip = request.headers.get("X-Real-IP")
    if real_ip and real_ip.strip():
        return real_ip.strip()

    return request.client.host if request.client else "unknown"


def get_user_agent(request: Request) -> Optional[str]:
    return request.headers.get("User-Agent")


def get_bearer_token(request: Request) -> Optional[str]:
    """从 Authorization 头读取 Bearer 令牌，没有时回退到进程内会话"""
    authorization = request.headers.get("Authorization")
    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer" and parts[1]:
            return parts[1]
    session = request.scope.get("session")
    if session:
        return session.get("token")
    return None
