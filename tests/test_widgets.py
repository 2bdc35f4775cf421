"""Tests for app/services/widgets.py: the five sidebar widgets."""

from __future__ import annotations

import logging
from datetime import timedelta

from markupsafe import Markup

import app.services.content as content_service
from app.core.context import DataModel
from app.schemas.theme import ThemeCategory, ThemeTag
from app.services import blog as blog_service
from app.core.projection import project_settings
from app.services.widgets import (
    fill_most_comment_articles,
    fill_most_use_categories,
    fill_most_use_tags,
    fill_most_view_articles,
    fill_recent_comments,
)
from app.utils.timeutil import utcnow
from tests.factories import add_article, add_category, add_comment, add_tag, set_setting


def _setting_map(db, blog):
    return project_settings(blog_service.get_all_settings(db, blog.blog_id))


def _warnings(caplog):
    return [r for r in caplog.records if r.levelno == logging.WARNING]


class TestCategories:

    def test_category_url_is_blog_url_plus_title(self, db_session, alice):
        add_category(db_session, alice, "Go")
        data_model = DataModel()

        fill_most_use_categories(db_session, _setting_map(db_session, alice), data_model, alice.blog_id)

        assert data_model["MostUseCategories"] == [ThemeCategory(title="Go", url="https://alice.example/Go")]

    def test_ordered_by_number(self, db_session, alice):
        add_category(db_session, alice, "Rust", number=2)
        add_category(db_session, alice, "Go", number=1)
        data_model = DataModel()

        fill_most_use_categories(db_session, _setting_map(db_session, alice), data_model, alice.blog_id)

        assert [c.title for c in data_model["MostUseCategories"]] == ["Go", "Rust"]

    def test_empty_blog_writes_empty_list(self, db_session, alice):
        data_model = DataModel()

        fill_most_use_categories(db_session, _setting_map(db_session, alice), data_model, alice.blog_id)

        assert data_model["MostUseCategories"] == []


class TestTags:

    def test_tag_url_and_limit(self, db_session, alice):
        set_setting(db_session, alice.blog_id, "mostUseTagListSize", "2")
        add_tag(db_session, alice, "python", article_count=5)
        add_tag(db_session, alice, "go", article_count=9)
        add_tag(db_session, alice, "misc", article_count=1)
        data_model = DataModel()

        fill_most_use_tags(db_session, _setting_map(db_session, alice), data_model, alice.blog_id)

        assert data_model["MostUseTags"] == [
            ThemeTag(title="go", url="https://alice.example/tags/go"),
            ThemeTag(title="python", url="https://alice.example/tags/python"),
        ]

    def test_malformed_size_uses_default(self, db_session, alice, monkeypatch, caplog):
        set_setting(db_session, alice.blog_id, "mostUseTagListSize", "lots")
        sizes = []

        def fake_get_tags(db, size, blog_id):
            sizes.append(size)
            return []

        monkeypatch.setattr(content_service, "get_tags", fake_get_tags)
        data_model = DataModel()

        fill_most_use_tags(db_session, _setting_map(db_session, alice), data_model, alice.blog_id)

        assert sizes == [15]
        assert data_model["MostUseTags"] == []
        assert len(_warnings(caplog)) == 1


class TestArticles:

    def test_most_view_articles_order_url_and_author(self, db_session, alice):
        add_article(db_session, alice, "Less", "/less", view_count=1)
        add_article(db_session, alice, "More", "/more", view_count=10)
        data_model = DataModel()

        fill_most_view_articles(db_session, _setting_map(db_session, alice), data_model, alice.blog_id)

        articles = data_model["MostViewArticles"]
        assert [a.title for a in articles] == ["More", "Less"]
        assert articles[0].url == "https://alice.example/more"
        assert articles[0].created_at == "an hour ago"
        assert articles[0].author.name == "Alice"
        assert articles[0].author.url == "https://alice.example/authors/alice"

    def test_most_comment_articles_respects_size(self, db_session, alice):
        set_setting(db_session, alice.blog_id, "mostCommentArticleListSize", "1")
        add_article(db_session, alice, "Quiet", "/quiet", comment_count=0)
        add_article(db_session, alice, "Busy", "/busy", comment_count=4)
        data_model = DataModel()

        fill_most_comment_articles(db_session, _setting_map(db_session, alice), data_model, alice.blog_id)

        assert [a.title for a in data_model["MostCommentArticles"]] == ["Busy"]

    def test_malformed_view_size_uses_default(self, db_session, alice, monkeypatch, caplog):
        set_setting(db_session, alice.blog_id, "mostViewArticleListSize", "1.5")
        sizes = []
        monkeypatch.setattr(content_service, "get_most_view_articles",
                            lambda db, size, blog_id: sizes.append(size) or [])

        fill_most_view_articles(db_session, _setting_map(db_session, alice), DataModel(), alice.blog_id)

        assert sizes == [15]
        assert len(_warnings(caplog)) == 1

    def test_negative_view_size_keeps_limit(self, db_session, alice, caplog):
        set_setting(db_session, alice.blog_id, "mostViewArticleListSize", "-1")
        for i in range(20):
            add_article(db_session, alice, f"Post {i}", f"/post-{i}", view_count=i)
        data_model = DataModel()

        fill_most_view_articles(db_session, _setting_map(db_session, alice), data_model, alice.blog_id)

        assert len(data_model["MostViewArticles"]) == 15
        assert data_model["MostViewArticles"][0].title == "Post 19"
        assert len(_warnings(caplog)) == 1

    def test_most_view_articles_respects_size(self, db_session, alice):
        set_setting(db_session, alice.blog_id, "mostViewArticleListSize", "2")
        for i in range(4):
            add_article(db_session, alice, f"Post {i}", f"/post-{i}", view_count=i)
        data_model = DataModel()

        fill_most_view_articles(db_session, _setting_map(db_session, alice), data_model, alice.blog_id)

        assert [a.title for a in data_model["MostViewArticles"]] == ["Post 3", "Post 2"]

    def test_malformed_comment_size_uses_default(self, db_session, alice, monkeypatch, caplog):
        set_setting(db_session, alice.blog_id, "mostCommentArticleListSize", "several")
        sizes = []
        monkeypatch.setattr(content_service, "get_most_comment_articles",
                            lambda db, size, blog_id: sizes.append(size) or [])

        fill_most_comment_articles(db_session, _setting_map(db_session, alice), DataModel(), alice.blog_id)

        assert sizes == [7]
        assert len(_warnings(caplog)) == 1


class TestRecentComments:

    def test_comment_is_rendered_markdown_without_url(self, db_session, alice):
        article = add_article(db_session, alice, "Post", "/post")
        add_comment(db_session, alice, article, "old", created_at=utcnow() - timedelta(days=2))
        add_comment(db_session, alice, article, "**new**", created_at=utcnow() - timedelta(minutes=3))
        data_model = DataModel()

        fill_recent_comments(db_session, _setting_map(db_session, alice), data_model, alice.blog_id)

        comments = data_model["RecentComments"]
        assert len(comments) == 2
        assert isinstance(comments[0].title, Markup)
        assert "<strong>new</strong>" in comments[0].title
        assert comments[0].content == ""
        assert comments[0].url is None
        assert comments[0].created_at == "3 minutes ago"
        assert comments[0].author.url == "https://alice.example/authors/alice"

    def test_malformed_size_uses_default(self, db_session, alice, monkeypatch, caplog):
        set_setting(db_session, alice.blog_id, "recentCommentListSize", "")
        sizes = []
        monkeypatch.setattr(content_service, "get_recent_comments",
                            lambda db, size, blog_id: sizes.append(size) or [])

        fill_recent_comments(db_session, _setting_map(db_session, alice), DataModel(), alice.blog_id)

        assert sizes == [7]
        assert len(_warnings(caplog)) == 1

    def test_recent_comments_respects_size(self, db_session, alice):
        set_setting(db_session, alice.blog_id, "recentCommentListSize", "2")
        article = add_article(db_session, alice, "Post", "/post")
        for minutes in (1, 2, 3):
            add_comment(db_session, alice, article, f"comment {minutes}",
                        created_at=utcnow() - timedelta(minutes=minutes))
        data_model = DataModel()

        fill_recent_comments(db_session, _setting_map(db_session, alice), data_model, alice.blog_id)

        assert ["comment 1" in c.title for c in data_model["RecentComments"]] == [True, False]
        assert len(data_model["RecentComments"]) == 2
