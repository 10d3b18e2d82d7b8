"""Base class for persisted domain entities"""

from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """Common parent of all table models so they share one metadata"""
    pass
