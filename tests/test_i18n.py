"""Tests for app/i18n/messages.py: locale message tables."""

from __future__ import annotations

import json
import logging

from app.i18n import messages


class TestMessages:

    def test_known_locales(self):
        assert {"en_US", "zh_CN"} <= set(messages.get_locales())

    def test_get_messages(self):
        assert messages.get_messages("en_US")["readMore"] == "Read more"

    def test_unknown_locale_falls_back_to_default(self, caplog):
        fallback = messages.get_messages("xx_XX")

        assert fallback == messages.get_messages("en_US")
        assert any(r.levelno == logging.WARNING for r in caplog.records)

    def test_returned_table_is_a_copy(self):
        table = messages.get_messages("en_US")
        table["readMore"] = "changed"

        assert messages.get_messages("en_US")["readMore"] == "Read more"

    def test_load_replaces_tables(self, tmp_path):
        (tmp_path / "fr_FR.json").write_text(json.dumps({"home": "Accueil"}), encoding="utf-8")
        try:
            messages.load(tmp_path)
            assert messages.get_locales() == ["fr_FR"]
            assert messages.get_messages("fr_FR")["home"] == "Accueil"
        finally:
            messages.load()

    def test_reload_never_empties_current_tables(self, tmp_path):
        (tmp_path / "fr_FR.json").write_text(json.dumps({"home": "Accueil"}), encoding="utf-8")
        current = messages._messages
        try:
            messages.load(tmp_path)
            assert "en_US" in current
            assert messages._messages is not current
        finally:
            messages.load()
