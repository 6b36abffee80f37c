"""
SQLAlchemy ORM model for the key-value store.
"""

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class KeyValue(Base):
    """
    One stored value (a JSON document or a plain flag) under a string key.
    """
    __tablename__ = 'kv_store'

    key = Column(String(255), primary_key=True, nullable=False)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<KeyValue({self.key})>"
