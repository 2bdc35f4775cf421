"""Markdown 渲染"""
import markdown
from markupsafe import Markup


_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]


def render_markdown(text: str) -> Markup:
    """将 Markdown 渲染为可直接输出到模板的 HTML"""
    if not text:
        return Markup("")
    html = markdown.markdown(text, extensions=_EXTENSIONS, output_format="html")
    return Markup(html)
