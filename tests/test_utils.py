"""Tests for app/utils: Markdown rendering and relative time."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from markupsafe import Markup

from app.utils.markdown import render_markdown
from app.utils.timeutil import humanize_time


class TestRenderMarkdown:

    def test_renders_html_markup(self):
        html = render_markdown("**hi**")

        assert isinstance(html, Markup)
        assert html == Markup("<p><strong>hi</strong></p>")

    def test_empty_text(self):
        assert render_markdown("") == Markup("")


class TestHumanizeTime:

    def test_minutes_ago(self):
        now = datetime(2024, 5, 1, 12, 0, 0)

        assert humanize_time(now - timedelta(minutes=5), now=now) == "5 minutes ago"

    def test_days_ago(self):
        now = datetime(2024, 5, 1, 12, 0, 0)

        assert humanize_time(now - timedelta(days=2), now=now) == "2 days ago"

    def test_aware_datetime_is_converted_to_utc(self):
        now = datetime(2024, 5, 1, 12, 0, 0)
        value = datetime(2024, 5, 1, 19, 0, 0, tzinfo=timezone(timedelta(hours=8)))

        assert humanize_time(value, now=now) == "an hour ago"

    def test_none(self):
        assert humanize_time(None) == ""
