"""
初始化博客: 创建博客管理员、成员关系、默认设置与统计
"""
import logging
from typing import Dict, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.setting import Setting
from app.models.statistic import Statistic
from app.models.user import BlogUser, User
from app.schemas.setting import (
    SETTING_BASIC_BLOG_TITLE,
    SETTING_BASIC_BLOG_URL,
    SETTING_DEFINITIONS,
    STATISTIC_NAMES,
)
from app.services.blog import invalidate_settings_cache

logger = logging.getLogger(__name__)


class BlogExistsError(ValueError):
    pass


def init_blog(
    db: Session,
    username: str,
    nickname: Optional[str] = None,
    avatar_url: str = "",
    overrides: Optional[Dict[str, str]] = None
) -> User:
    """创建一个新博客并返回其管理员

    overrides 用于覆盖默认设置值, key 为设置名; 未指定 blogURL 时按
    SERVER_URL + BLOG_PATH_PREFIX + /username 生成。
    """
    if db.query(User).filter(User.name == username).first():
        raise BlogExistsError(f"user [{username}] already exists")

    blog_id = (db.query(func.max(User.blog_id)).scalar() or 0) + 1
    user = User(name=username, nickname=nickname or username, avatar_url=avatar_url, blog_id=blog_id)
    db.add(user)
    db.flush()
    db.add(BlogUser(blog_id=blog_id, user_id=user.id, role="admin"))

    values = {
        SETTING_BASIC_BLOG_TITLE: f"{nickname or username}'s Blog",
        SETTING_BASIC_BLOG_URL: f"{settings.SERVER_URL}{settings.BLOG_PATH_PREFIX}/{username}",
    }
    values.update(overrides or {})
    for name, definition in SETTING_DEFINITIONS.items():
        db.add(Setting(
            category=definition.category.value,
            name=name,
            value=values.get(name, definition.default),
            blog_id=blog_id
        ))
    for name in STATISTIC_NAMES:
        db.add(Statistic(name=name, value="0", blog_id=blog_id))

    db.commit()
    db.refresh(user)
    invalidate_settings_cache(blog_id)
    logger.info(f"Blog [{blog_id}] initialized for user [{username}]")
    return user
