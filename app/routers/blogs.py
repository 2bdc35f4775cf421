"""
博客前台页面

所有路由都依赖 resolve_blog: 路径命中文章时在依赖中直接渲染文章,
下面的处理函数只会在未命中文章时执行。
"""
import logging
import math
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.context import BlogContext
from app.core.database import get_db
from app.core.deps import resolve_blog
from app.core.projection import parse_size_setting
from app.models.article import Article
from app.schemas.setting import (
    SETTING_PREFERENCE_ARTICLE_LIST_PAGE_SIZE,
    SETTING_PREFERENCE_ARTICLE_LIST_PAGE_SIZE_DEFAULT,
)
from app.schemas.theme import ThemeArticle
from app.services import content
from app.services import theme
from app.services.widgets import blog_url_of, build_theme_article


router = APIRouter(prefix=settings.BLOG_PATH_PREFIX, tags=["博客"])
logger = logging.getLogger(__name__)


def _page_size(ctx: BlogContext) -> int:
    return parse_size_setting(ctx.data_model["Setting"], SETTING_PREFERENCE_ARTICLE_LIST_PAGE_SIZE,
                              SETTING_PREFERENCE_ARTICLE_LIST_PAGE_SIZE_DEFAULT)


def _render_list(request: Request, ctx: BlogContext, articles: List[Article], total: int,
                 page: int, size: int, list_title: str = ""):
    blog_url = blog_url_of(ctx.data_model["Setting"])
    theme_articles: List[ThemeArticle] = [build_theme_article(article, blog_url) for article in articles]
    pagination = {
        "CurrentPage": page,
        "PageCount": math.ceil(total / size) if size else 0,
        "Total": total,
    }
    return theme.render(
        request, ctx, "index.html",
        Articles=theme_articles,
        Pagination=pagination,
        ListTitle=list_title
    )


@router.get("/{username}", response_class=HTMLResponse)
def show_index(
    request: Request,
    p: int = Query(1, ge=1),
    ctx: BlogContext = Depends(resolve_blog),
    db: Session = Depends(get_db)
):
    """博客首页文章列表"""
    size = _page_size(ctx)
    articles, total = content.get_articles(db, p, size, ctx.blog_id)
    return _render_list(request, ctx, articles, total, p, size)


@router.get("/{username}/tags/{tag_title}", response_class=HTMLResponse)
def show_tag_articles(
    request: Request,
    tag_title: str,
    p: int = Query(1, ge=1),
    ctx: BlogContext = Depends(resolve_blog),
    db: Session = Depends(get_db)
):
    """标签下的文章列表"""
    tag = content.get_tag_by_title(db, tag_title, ctx.blog_id)
    if not tag:
        raise HTTPException(status_code=404, detail="标签不存在")

    size = _page_size(ctx)
    articles, total = content.get_tag_articles(db, tag.id, p, size, ctx.blog_id)
    return _render_list(request, ctx, articles, total, p, size, list_title=tag.title)


@router.get("/{username}/{path:path}", response_class=HTMLResponse)
def show_category_articles(
    request: Request,
    path: str,
    p: int = Query(1, ge=1),
    ctx: BlogContext = Depends(resolve_blog),
    db: Session = Depends(get_db)
):
    """未命中文章的路径按分类标题解析, 空路径为首页"""
    title = path.strip().strip("/")
    size = _page_size(ctx)
    if not title:
        articles, total = content.get_articles(db, p, size, ctx.blog_id)
        return _render_list(request, ctx, articles, total, p, size)

    category = content.get_category_by_title(db, title, ctx.blog_id)
    if not category:
        logger.info(f"Path [{ctx.path}] of blog [{ctx.blog_id}] matches neither article nor category")
        raise HTTPException(status_code=404, detail="页面不存在")

    articles, total = content.get_category_articles(db, category.id, p, size, ctx.blog_id)
    return _render_list(request, ctx, articles, total, p, size, list_title=category.title)
