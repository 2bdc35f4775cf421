"""
主题模板渲染

模板位于 THEME_DIR/{themeName}/, 渲染上下文为 DataModel 的全部 key 加上页面自身数据。
"""
import logging
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.context import BlogContext
from app.schemas.setting import SETTING_THEME_NAME
from app.services import content
from app.services.widgets import blog_url_of, build_theme_article
from app.utils.markdown import render_markdown

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(settings.THEME_DIR))


def theme_of(ctx: BlogContext) -> str:
    theme = ctx.data_model.get("Setting", {}).get(SETTING_THEME_NAME) or ""
    # 主题名只能是 THEME_DIR 下的一级目录名
    if theme in ("", ".", "..") or "/" in theme or "\\" in theme or not (settings.THEME_DIR / theme).is_dir():
        logger.warning(f"Theme [{theme}] of blog [{ctx.blog_id}] not found, fallback to [{settings.DEFAULT_THEME}]")
        return settings.DEFAULT_THEME
    return theme


def render(request: Request, ctx: BlogContext, template: str, status_code: int = 200, **page: Any):
    context = dict(ctx.data_model)
    context.update(page)
    return templates.TemplateResponse(
        request,
        f"{theme_of(ctx)}/{template}",
        context,
        status_code=status_code
    )


def show_article(request: Request, db: Session, ctx: BlogContext):
    """渲染 ctx.article 详情页"""
    article = ctx.article
    content.increment_view_count(db, article)
    logger.info(f"Show article [{article.id}] {article.path} of blog [{ctx.blog_id}]")

    theme_article = build_theme_article(article, blog_url_of(ctx.data_model["Setting"]))
    theme_article.content = render_markdown(article.content)
    return render(request, ctx, "article.html", Article=theme_article)
