from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from app.core.config import settings


# SQLite 连接会被线程池中的不同线程使用
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    pool_recycle=3600,
    echo=settings.DEBUG,
    connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    pass


def init_db(bind=engine) -> None:
    """注册全部模型并建表"""
    from app import models  # noqa: F401

    Base.metadata.create_all(bind=bind)


def get_db():
    """Dependency to get database session, one per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
