from ..database.connection import Base

__all__ = ["Base"]
