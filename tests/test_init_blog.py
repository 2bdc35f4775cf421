"""Tests for app/services/init.py: new blog bootstrap."""

from __future__ import annotations

import pytest

from app.models.setting import Setting
from app.models.statistic import Statistic
from app.models.user import BlogUser
from app.schemas.setting import SETTING_DEFINITIONS, STATISTIC_NAMES
from app.services.blog import SettingNotFoundError, get_blog_users, get_setting
from app.services.init import BlogExistsError, init_blog


class TestInitBlog:

    def test_creates_every_defined_setting(self, db_session, alice):
        names = {s.name for s in db_session.query(Setting).filter(Setting.blog_id == alice.blog_id)}

        assert names == set(SETTING_DEFINITIONS)

    def test_creates_zeroed_statistics(self, db_session, alice):
        stats = db_session.query(Statistic).filter(Statistic.blog_id == alice.blog_id).all()

        assert sorted(s.name for s in stats) == sorted(STATISTIC_NAMES)
        assert {s.value for s in stats} == {"0"}

    def test_admin_is_blog_member(self, db_session, alice):
        users, total = get_blog_users(db_session, 1, alice.blog_id)

        assert total == 1
        assert users[0].id == alice.id
        assert db_session.query(BlogUser).filter(BlogUser.blog_id == alice.blog_id).one().role == "admin"

    def test_default_blog_url(self, db_session):
        bob = init_blog(db_session, "bob")

        assert get_setting(db_session, "basic", "blogURL", bob.blog_id).value == "http://localhost:5879/bob"

    def test_blog_ids_are_distinct(self, db_session, alice):
        bob = init_blog(db_session, "bob")

        assert bob.blog_id != alice.blog_id

    def test_duplicate_user(self, db_session, alice):
        with pytest.raises(BlogExistsError):
            init_blog(db_session, "alice")


class TestGetSetting:

    def test_missing_setting_raises(self, db_session, alice):
        with pytest.raises(SettingNotFoundError) as exc_info:
            get_setting(db_session, "basic", "nope", alice.blog_id)

        assert exc_info.value.name == "nope"
