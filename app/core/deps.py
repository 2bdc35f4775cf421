from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.context import BlogContext, BlogNotResolvedError, DataModel
from app.core.database import get_db
from app.models.user import User
from app.schemas.setting import SETTING_BASIC_BLOG_URL, SETTING_THEME_NAME
from app.services import blog as blog_service
from app.services import content
from app.services.data_model import fill_common
from app.services.theme import show_article


class ContentResolved(Exception):
    """请求路径命中了文章, 携带已渲染的响应终止后续路由"""

    def __init__(self, response):
        super().__init__("content resolved")
        self.response = response


def remainder_path(request_path: str, username: str) -> str:
    """/{username}/hello-world?x=1 -> /hello-world"""
    prefix = f"{settings.BLOG_PATH_PREFIX}/{username}"
    path = request_path
    if path.startswith(prefix):
        path = path[len(prefix):]
    path = path.split("?", 1)[0]
    return path.strip()


def resolve_blog(
    request: Request,
    username: str,
    db: Session = Depends(get_db)
) -> BlogContext:
    """解析博客及文章

    用户不存在时返回 404; 路径命中文章时直接渲染文章并终止路由,
    否则把上下文交给后续的列表类路由处理同一路径。
    """
    username = username.strip()
    if not username:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

    blog_admin = blog_service.get_user_by_name(db, username)
    if blog_admin is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

    ctx = BlogContext(blog_admin=blog_admin)
    request.state.blog = ctx
    fill_common(db, ctx)

    ctx.path = remainder_path(request.url.path, username)
    article = content.get_article_by_path(db, ctx.blog_id, ctx.path)
    if article is None:
        return ctx

    ctx.article = article
    raise ContentResolved(show_article(request, db, ctx))


def get_blog_context(request: Request) -> BlogContext:
    ctx = getattr(request.state, "blog", None)
    if ctx is None:
        raise BlogNotResolvedError("blog context accessed before resolve_blog")
    return ctx


def get_blog_admin(request: Request) -> User:
    return get_blog_context(request).blog_admin


def get_data_model(request: Request) -> DataModel:
    return get_blog_context(request).data_model


def get_blog_url(request: Request) -> str:
    return get_data_model(request)["Setting"][SETTING_BASIC_BLOG_URL]


def get_theme(request: Request) -> str:
    return get_data_model(request)["Setting"][SETTING_THEME_NAME]
