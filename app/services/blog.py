"""
博客级查询: 用户、设置、统计、导航
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from app.core.cache import redis_client
from app.core.config import settings
from app.models.navigation import Navigation
from app.models.setting import Setting
from app.models.statistic import Statistic
from app.models.user import BlogUser, User
from app.schemas.setting import SettingItem

logger = logging.getLogger(__name__)


class SettingNotFoundError(LookupError):
    """博客缺少必需的设置项, 属于数据初始化问题"""

    def __init__(self, category: str, name: str, blog_id: int):
        self.category = category
        self.name = name
        self.blog_id = blog_id
        super().__init__(f"setting [{category}.{name}] of blog [{blog_id}] not found")


def get_user_by_name(db: Session, name: str) -> Optional[User]:
    return db.query(User).filter(User.name == name).first()


def get_blog_users(db: Session, page: int, blog_id: int) -> Tuple[List[User], int]:
    """分页获取博客成员, 返回 (当前页用户, 总数)"""
    size = settings.USER_PAGE_SIZE
    query = (
        db.query(User)
        .join(BlogUser, BlogUser.user_id == User.id)
        .filter(BlogUser.blog_id == blog_id)
        .distinct()
    )
    total = query.count()
    users = query.order_by(User.id).offset((page - 1) * size).limit(size).all()
    return users, total


def get_setting(db: Session, category: str, name: str, blog_id: int) -> Setting:
    setting = db.query(Setting).filter(
        Setting.category == category,
        Setting.name == name,
        Setting.blog_id == blog_id
    ).first()
    if setting is None:
        raise SettingNotFoundError(category, name, blog_id)
    return setting


def _settings_cache_key(blog_id: int) -> str:
    return f"blog:{blog_id}:settings"


def get_all_settings(db: Session, blog_id: int) -> List[SettingItem]:
    cache_key = _settings_cache_key(blog_id)
    cached = redis_client.get(cache_key)
    if cached:
        return [SettingItem(**item) for item in cached]

    rows = db.query(Setting).filter(Setting.blog_id == blog_id).order_by(Setting.id).all()
    items = [SettingItem.model_validate(row) for row in rows]
    redis_client.set(cache_key, [item.model_dump() for item in items], expire=settings.SETTINGS_CACHE_EXPIRE)
    return items


def invalidate_settings_cache(blog_id: int) -> None:
    redis_client.delete(_settings_cache_key(blog_id))


def get_all_statistics(db: Session, blog_id: int) -> List[Statistic]:
    return db.query(Statistic).filter(Statistic.blog_id == blog_id).order_by(Statistic.id).all()


def get_navigations(db: Session, blog_id: int) -> List[Navigation]:
    return (
        db.query(Navigation)
        .filter(Navigation.blog_id == blog_id)
        .order_by(Navigation.number, Navigation.id)
        .all()
    )
