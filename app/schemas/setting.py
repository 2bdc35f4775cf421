"""
博客设置定义

所有被主题层读取的设置都在 SETTING_DEFINITIONS 中声明: 所属分类、默认值、
以及该值在模板中是普通文本还是可信 HTML。
"""
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict


class SettingCategory(str, Enum):
    BASIC = "basic"
    I18N = "i18n"
    PREFERENCE = "preference"
    THEME = "theme"
    ARTICLE = "article"


class SettingKind(str, Enum):
    PLAIN_TEXT = "plain_text"
    TRUSTED_HTML = "trusted_html"


# basic
SETTING_BASIC_BLOG_TITLE = "blogTitle"
SETTING_BASIC_BLOG_SUBTITLE = "blogSubtitle"
SETTING_BASIC_BLOG_URL = "blogURL"
SETTING_BASIC_FAVICON_URL = "faviconURL"
SETTING_BASIC_LOGO_URL = "logoURL"
SETTING_BASIC_META_KEYWORDS = "metaKeywords"
SETTING_BASIC_META_DESCRIPTION = "metaDescription"
SETTING_BASIC_HEADER = "header"
SETTING_BASIC_FOOTER = "footer"
SETTING_BASIC_NOTICE_BOARD = "noticeBoard"

# i18n
SETTING_I18N_LOCALE = "locale"

# preference
SETTING_PREFERENCE_ARTICLE_LIST_PAGE_SIZE = "articleListPageSize"
SETTING_PREFERENCE_MOST_USE_TAG_LIST_SIZE = "mostUseTagListSize"
SETTING_PREFERENCE_MOST_VIEW_ARTICLE_LIST_SIZE = "mostViewArticleListSize"
SETTING_PREFERENCE_RECENT_COMMENT_LIST_SIZE = "recentCommentListSize"
SETTING_PREFERENCE_MOST_COMMENT_ARTICLE_LIST_SIZE = "mostCommentArticleListSize"

SETTING_PREFERENCE_ARTICLE_LIST_PAGE_SIZE_DEFAULT = 20
SETTING_PREFERENCE_MOST_USE_TAG_LIST_SIZE_DEFAULT = 15
SETTING_PREFERENCE_MOST_VIEW_ARTICLE_LIST_SIZE_DEFAULT = 15
SETTING_PREFERENCE_RECENT_COMMENT_LIST_SIZE_DEFAULT = 7
SETTING_PREFERENCE_MOST_COMMENT_ARTICLE_LIST_SIZE_DEFAULT = 7

# theme
SETTING_THEME_NAME = "themeName"

# article
SETTING_ARTICLE_SIGN = "articleSign"

# 分类没有可配置的数量, 取一个足够大的上限
MOST_USE_CATEGORY_LIST_SIZE = 127

# statistics
STATISTIC_ARTICLE_COUNT = "statisticArticleCount"
STATISTIC_COMMENT_COUNT = "statisticCommentCount"
STATISTIC_VIEW_COUNT = "statisticViewCount"
STATISTIC_NAMES = [STATISTIC_ARTICLE_COUNT, STATISTIC_COMMENT_COUNT, STATISTIC_VIEW_COUNT]


class SettingDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: SettingCategory
    name: str
    default: str = ""
    kind: SettingKind = SettingKind.PLAIN_TEXT


class SettingItem(BaseModel):
    """存储层返回的单条设置"""
    model_config = ConfigDict(from_attributes=True)

    category: str
    name: str
    value: str = ""


def _define(category: SettingCategory, name: str, default: str = "",
            kind: SettingKind = SettingKind.PLAIN_TEXT) -> SettingDefinition:
    return SettingDefinition(category=category, name=name, default=default, kind=kind)


_DEFINITIONS: List[SettingDefinition] = [
    _define(SettingCategory.BASIC, SETTING_BASIC_BLOG_TITLE, "Pipe Blog"),
    _define(SettingCategory.BASIC, SETTING_BASIC_BLOG_SUBTITLE, "A small and beautiful blog"),
    _define(SettingCategory.BASIC, SETTING_BASIC_BLOG_URL),
    _define(SettingCategory.BASIC, SETTING_BASIC_FAVICON_URL, "/static/images/favicon.ico"),
    _define(SettingCategory.BASIC, SETTING_BASIC_LOGO_URL, "/static/images/logo.png"),
    _define(SettingCategory.BASIC, SETTING_BASIC_META_KEYWORDS, "blog"),
    _define(SettingCategory.BASIC, SETTING_BASIC_META_DESCRIPTION),
    _define(SettingCategory.BASIC, SETTING_BASIC_HEADER, kind=SettingKind.TRUSTED_HTML),
    _define(SettingCategory.BASIC, SETTING_BASIC_FOOTER, kind=SettingKind.TRUSTED_HTML),
    _define(SettingCategory.BASIC, SETTING_BASIC_NOTICE_BOARD, kind=SettingKind.TRUSTED_HTML),
    _define(SettingCategory.I18N, SETTING_I18N_LOCALE, "en_US"),
    _define(SettingCategory.PREFERENCE, SETTING_PREFERENCE_ARTICLE_LIST_PAGE_SIZE,
            str(SETTING_PREFERENCE_ARTICLE_LIST_PAGE_SIZE_DEFAULT)),
    _define(SettingCategory.PREFERENCE, SETTING_PREFERENCE_MOST_USE_TAG_LIST_SIZE,
            str(SETTING_PREFERENCE_MOST_USE_TAG_LIST_SIZE_DEFAULT)),
    _define(SettingCategory.PREFERENCE, SETTING_PREFERENCE_MOST_VIEW_ARTICLE_LIST_SIZE,
            str(SETTING_PREFERENCE_MOST_VIEW_ARTICLE_LIST_SIZE_DEFAULT)),
    _define(SettingCategory.PREFERENCE, SETTING_PREFERENCE_RECENT_COMMENT_LIST_SIZE,
            str(SETTING_PREFERENCE_RECENT_COMMENT_LIST_SIZE_DEFAULT)),
    _define(SettingCategory.PREFERENCE, SETTING_PREFERENCE_MOST_COMMENT_ARTICLE_LIST_SIZE,
            str(SETTING_PREFERENCE_MOST_COMMENT_ARTICLE_LIST_SIZE_DEFAULT)),
    _define(SettingCategory.THEME, SETTING_THEME_NAME, "default"),
    _define(SettingCategory.ARTICLE, SETTING_ARTICLE_SIGN, kind=SettingKind.TRUSTED_HTML),
]

SETTING_DEFINITIONS: Dict[str, SettingDefinition] = {d.name: d for d in _DEFINITIONS}

TRUSTED_HTML_SETTINGS = frozenset(
    d.name for d in _DEFINITIONS if d.kind is SettingKind.TRUSTED_HTML
)
