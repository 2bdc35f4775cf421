"""Shared test fixtures.

所有测试共用一个内存 SQLite 数据库, 每个测试前重建全部表。
"""

from __future__ import annotations

import os
from typing import Generator

# 必须在导入 app 之前设置, 避免连接默认的数据库文件
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REDIS_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app import models  # noqa: F401
from app.models.user import User
from app.services.init import init_blog


test_engine = create_engine(
    "sqlite://",
    poolclass=StaticPool,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Provide an isolated database session per test."""
    Base.metadata.drop_all(bind=test_engine)
    Base.metadata.create_all(bind=test_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """TestClient whose requests share the test session."""
    from app.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def alice(db_session: Session) -> User:
    """Blog owned by alice with a fixed blog URL."""
    return init_blog(db_session, "alice", nickname="Alice",
                     overrides={"blogURL": "https://alice.example"})
