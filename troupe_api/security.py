"""安全模块：密码哈希与校验

- 使用 Passlib 管理密码哈希，新密码采用 pbkdf2_sha256，长度不受限制。
- 旧系统留下的 bcrypt 哈希（$2b$...）仍可校验。
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256", "bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    """对明文密码进行哈希并返回哈希字符串。"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """验证明文密码与哈希是否匹配；任意异常视为验证失败。"""
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except Exception:
        return False
