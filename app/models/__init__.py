# Models module
from app.models.user import User, BlogUser
from app.models.article import Article, Category, Tag, article_tags, category_tags
from app.models.comment import Comment
from app.models.setting import Setting
from app.models.statistic import Statistic
from app.models.navigation import Navigation

__all__ = [
    "User", "BlogUser", "Article", "Category", "Tag", "article_tags", "category_tags",
    "Comment", "Setting", "Statistic", "Navigation",
]
