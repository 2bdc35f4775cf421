from sqlalchemy import Column, Integer, String, DateTime, Text, UniqueConstraint
from sqlalchemy.sql import func
from app.core.database import Base


class Setting(Base):
    """博客设置, 值统一以字符串存储"""
    __tablename__ = "settings"
    __table_args__ = (UniqueConstraint("blog_id", "name", name="uq_setting_blog_name"),)

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    category = Column(String(32), nullable=False, comment="basic / i18n / preference / theme / article / sign")
    name = Column(String(64), nullable=False)
    value = Column(Text, default="")
    blog_id = Column(Integer, nullable=False, index=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
