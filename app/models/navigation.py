from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Navigation(Base):
    __tablename__ = "navigations"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(50), nullable=False)
    url = Column(String(500), nullable=False)
    icon_url = Column(String(500), default="")
    open_method = Column(String(16), default="_self", comment="_self / _blank")
    number = Column(Integer, default=0, comment="排序")
    blog_id = Column(Integer, nullable=False, index=True)
