from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base


class User(Base):
    """博客用户, name 同时作为博客 URL 标识"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(32), unique=True, nullable=False, index=True)
    nickname = Column(String(50), default="")
    avatar_url = Column(String(500), default="")
    # 该用户作为管理员的博客
    blog_id = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())


# 博客成员表
class BlogUser(Base):
    __tablename__ = "blog_users"
    __table_args__ = (UniqueConstraint("blog_id", "user_id", name="uq_blog_user"),)

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    blog_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    role = Column(String(20), default="admin", comment="admin / editor")
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User")
