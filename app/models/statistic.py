from sqlalchemy import Column, Integer, String, UniqueConstraint
from app.core.database import Base


class Statistic(Base):
    __tablename__ = "statistics"
    __table_args__ = (UniqueConstraint("blog_id", "name", name="uq_statistic_blog_name"),)

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(64), nullable=False)
    value = Column(String(32), default="0")
    blog_id = Column(Integer, nullable=False, index=True)
