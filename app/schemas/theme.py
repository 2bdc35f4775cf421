"""
主题层展示对象, 每次请求重新构建, 不落库
"""
from typing import Any, Optional

from pydantic import BaseModel


class ThemeAuthor(BaseModel):
    name: str
    url: str
    avatar_url: str = ""


class ThemeCategory(BaseModel):
    title: str
    url: str


class ThemeTag(BaseModel):
    title: str
    url: str


class ThemeArticle(BaseModel):
    title: str
    url: str
    created_at: str
    author: ThemeAuthor
    abstract: str = ""
    # 仅文章详情页填充, 为渲染后的 HTML
    content: Optional[Any] = None
    view_count: int = 0
    comment_count: int = 0


class ThemeComment(BaseModel):
    # 评论 Markdown 渲染后的 HTML, 沿用 Title 字段承载
    title: Any
    content: str = ""
    # 评论链接目标尚未定义
    url: Optional[str] = None
    created_at: str
    author: ThemeAuthor
