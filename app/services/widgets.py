"""
侧边栏组件数据: 分类、标签、热门文章、最新评论、热议文章

每个 fill_* 只写自己的一个 DataModel key, 结果可能为空列表但不会缺失。
"""
from typing import Any, List, Mapping, Optional

from sqlalchemy.orm import Session

from app.core.context import DataModel
from app.core.projection import parse_size_setting
from app.models.article import Article
from app.models.user import User
from app.schemas.setting import (
    MOST_USE_CATEGORY_LIST_SIZE,
    SETTING_BASIC_BLOG_URL,
    SETTING_PREFERENCE_MOST_COMMENT_ARTICLE_LIST_SIZE,
    SETTING_PREFERENCE_MOST_COMMENT_ARTICLE_LIST_SIZE_DEFAULT,
    SETTING_PREFERENCE_MOST_USE_TAG_LIST_SIZE,
    SETTING_PREFERENCE_MOST_USE_TAG_LIST_SIZE_DEFAULT,
    SETTING_PREFERENCE_MOST_VIEW_ARTICLE_LIST_SIZE,
    SETTING_PREFERENCE_MOST_VIEW_ARTICLE_LIST_SIZE_DEFAULT,
    SETTING_PREFERENCE_RECENT_COMMENT_LIST_SIZE,
    SETTING_PREFERENCE_RECENT_COMMENT_LIST_SIZE_DEFAULT,
)
from app.schemas.theme import ThemeArticle, ThemeAuthor, ThemeCategory, ThemeComment, ThemeTag
from app.services import content
from app.utils.markdown import render_markdown
from app.utils.timeutil import humanize_time


def blog_url_of(setting_map: Mapping[str, Any]) -> str:
    return str(setting_map.get(SETTING_BASIC_BLOG_URL) or "").rstrip("/")


def build_theme_author(user: Optional[User], blog_url: str) -> ThemeAuthor:
    if user is None:
        return ThemeAuthor(name="", url=blog_url)
    return ThemeAuthor(
        name=user.nickname or user.name,
        url=f"{blog_url}/authors/{user.name}",
        avatar_url=user.avatar_url or ""
    )


def build_theme_article(article: Article, blog_url: str) -> ThemeArticle:
    return ThemeArticle(
        title=article.title,
        url=blog_url + article.path,
        created_at=humanize_time(article.created_at),
        author=build_theme_author(article.author, blog_url),
        abstract=article.abstract or "",
        view_count=article.view_count or 0,
        comment_count=article.comment_count or 0
    )


def fill_most_use_categories(db: Session, setting_map: Mapping[str, Any], data_model: DataModel, blog_id: int):
    blog_url = blog_url_of(setting_map)
    categories = content.get_categories(db, MOST_USE_CATEGORY_LIST_SIZE, blog_id)
    data_model["MostUseCategories"] = [
        ThemeCategory(title=category.title, url=f"{blog_url}/{category.title}")
        for category in categories
    ]


def fill_most_use_tags(db: Session, setting_map: Mapping[str, Any], data_model: DataModel, blog_id: int):
    blog_url = blog_url_of(setting_map)
    size = parse_size_setting(setting_map, SETTING_PREFERENCE_MOST_USE_TAG_LIST_SIZE,
                              SETTING_PREFERENCE_MOST_USE_TAG_LIST_SIZE_DEFAULT)
    tags = content.get_tags(db, size, blog_id)
    data_model["MostUseTags"] = [
        ThemeTag(title=tag.title, url=f"{blog_url}/tags/{tag.title}")
        for tag in tags
    ]


def fill_most_view_articles(db: Session, setting_map: Mapping[str, Any], data_model: DataModel, blog_id: int):
    blog_url = blog_url_of(setting_map)
    size = parse_size_setting(setting_map, SETTING_PREFERENCE_MOST_VIEW_ARTICLE_LIST_SIZE,
                              SETTING_PREFERENCE_MOST_VIEW_ARTICLE_LIST_SIZE_DEFAULT)
    articles = content.get_most_view_articles(db, size, blog_id)
    data_model["MostViewArticles"] = [build_theme_article(article, blog_url) for article in articles]


def fill_recent_comments(db: Session, setting_map: Mapping[str, Any], data_model: DataModel, blog_id: int):
    blog_url = blog_url_of(setting_map)
    size = parse_size_setting(setting_map, SETTING_PREFERENCE_RECENT_COMMENT_LIST_SIZE,
                              SETTING_PREFERENCE_RECENT_COMMENT_LIST_SIZE_DEFAULT)
    comments = content.get_recent_comments(db, size, blog_id)
    theme_comments: List[ThemeComment] = []
    for comment in comments:
        theme_comments.append(ThemeComment(
            title=render_markdown(comment.content),
            created_at=humanize_time(comment.created_at),
            author=build_theme_author(comment.author, blog_url)
        ))
    data_model["RecentComments"] = theme_comments


def fill_most_comment_articles(db: Session, setting_map: Mapping[str, Any], data_model: DataModel, blog_id: int):
    blog_url = blog_url_of(setting_map)
    size = parse_size_setting(setting_map, SETTING_PREFERENCE_MOST_COMMENT_ARTICLE_LIST_SIZE,
                              SETTING_PREFERENCE_MOST_COMMENT_ARTICLE_LIST_SIZE_DEFAULT)
    articles = content.get_most_comment_articles(db, size, blog_id)
    data_model["MostCommentArticles"] = [build_theme_article(article, blog_url) for article in articles]


# (DataModel key, filler)
WIDGETS = [
    ("MostUseCategories", fill_most_use_categories),
    ("MostUseTags", fill_most_use_tags),
    ("MostViewArticles", fill_most_view_articles),
    ("RecentComments", fill_recent_comments),
    ("MostCommentArticles", fill_most_comment_articles),
]
