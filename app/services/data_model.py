"""
主题公共数据组装

fill_common 为当前博客填充 DataModel: 文案、设置、统计、站点信息、导航以及各侧边栏组件。
各步骤互相独立, 某一步失败只会让它负责的 key 退化为空值, 不影响其它 key。
"""
import logging
from datetime import date
from typing import Any, Callable, Dict

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.context import BlogContext, DataModel
from app.core.projection import project_i18n, project_settings, project_statistics
from app.i18n import messages as i18n
from app.schemas.setting import (
    SETTING_BASIC_BLOG_TITLE,
    SETTING_BASIC_BLOG_URL,
    SETTING_BASIC_FAVICON_URL,
    SETTING_BASIC_LOGO_URL,
    SETTING_BASIC_META_DESCRIPTION,
    SETTING_BASIC_META_KEYWORDS,
    SETTING_I18N_LOCALE,
    SettingCategory,
)
from app.services import blog as blog_service
from app.services.widgets import WIDGETS

logger = logging.getLogger(__name__)

# DataModel key -> 配置项
SCALAR_SETTINGS = {
    "FaviconURL": SETTING_BASIC_FAVICON_URL,
    "LogoURL": SETTING_BASIC_LOGO_URL,
    "BlogURL": SETTING_BASIC_BLOG_URL,
    "Title": SETTING_BASIC_BLOG_TITLE,
    "MetaKeywords": SETTING_BASIC_META_KEYWORDS,
    "MetaDescription": SETTING_BASIC_META_DESCRIPTION,
}


def _isolated(db: Session, data_model: DataModel, blog_id: int, step: str,
              defaults: Dict[str, Any], fill: Callable[[], None]) -> None:
    try:
        fill()
    except Exception:
        logger.exception(f"fill [{step}] for blog [{blog_id}] failed, fallback to defaults")
        db.rollback()
        data_model.update(defaults)


def fill_common(db: Session, ctx: BlogContext) -> DataModel:
    if settings.is_development:
        i18n.load()

    blog_id = ctx.blog_id
    data_model = ctx.data_model
    setting_map: Dict[str, Any] = {}

    def fill_i18n():
        locale = blog_service.get_setting(db, SettingCategory.I18N.value, SETTING_I18N_LOCALE, blog_id)
        data_model["I18n"] = project_i18n(i18n.get_messages(locale.value))

    def fill_settings():
        setting_map.update(project_settings(blog_service.get_all_settings(db, blog_id)))
        data_model["Setting"] = setting_map

    def fill_statistics():
        data_model["Statistic"] = project_statistics(blog_service.get_all_statistics(db, blog_id))

    def fill_user_count():
        _, total = blog_service.get_blog_users(db, 1, blog_id)
        data_model["UserCount"] = total

    def fill_navigations():
        data_model["Navigations"] = blog_service.get_navigations(db, blog_id)

    _isolated(db, data_model, blog_id, "i18n", {"I18n": {}}, fill_i18n)
    _isolated(db, data_model, blog_id, "settings", {"Setting": setting_map}, fill_settings)
    _isolated(db, data_model, blog_id, "statistics", {"Statistic": {}}, fill_statistics)

    for key, name in SCALAR_SETTINGS.items():
        data_model[key] = setting_map.get(name, "")
    data_model["Conf"] = settings.public_conf
    data_model["Year"] = date.today().year

    _isolated(db, data_model, blog_id, "user count", {"UserCount": 0}, fill_user_count)
    _isolated(db, data_model, blog_id, "navigations", {"Navigations": []}, fill_navigations)

    for key, fill_widget in WIDGETS:
        _isolated(db, data_model, blog_id, key, {key: []},
                  lambda fill_widget=fill_widget: fill_widget(db, setting_map, data_model, blog_id))

    return data_model
