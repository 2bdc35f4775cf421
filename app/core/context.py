"""
请求级博客上下文

BlogContext 由 resolve_blog 创建并挂在 request.state.blog 上, 只在本次请求内有效,
绝不能跨请求缓存: DataModel 中包含按租户解析出的设置。
"""
from dataclasses import dataclass, field
from typing import Optional

from app.models.article import Article
from app.models.user import User


class DataModel(dict):
    """交给主题模板渲染的数据, key 为模板变量名"""

    REQUIRED_KEYS = (
        "Setting", "I18n", "Statistic", "Navigations",
        "MostUseCategories", "MostUseTags", "MostViewArticles",
        "RecentComments", "MostCommentArticles",
        "FaviconURL", "LogoURL", "BlogURL", "Title",
        "MetaKeywords", "MetaDescription", "Conf", "Year", "UserCount",
    )

    def missing_keys(self) -> list:
        return [key for key in self.REQUIRED_KEYS if key not in self]


@dataclass
class BlogContext:
    blog_admin: User
    data_model: DataModel = field(default_factory=DataModel)
    article: Optional[Article] = None
    # 去掉 /{username} 前缀后的路径
    path: str = ""

    @property
    def blog_id(self) -> int:
        return self.blog_admin.blog_id


class BlogNotResolvedError(RuntimeError):
    """在 resolve_blog 之前访问博客上下文"""
