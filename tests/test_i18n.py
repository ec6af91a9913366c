"""Tests for the en/ko string table (nasadash/i18n.py)."""

from nasadash import i18n
from nasadash.i18n import t


class TestTranslate:

    def test_korean_entry(self):
        assert t("page_title", "ko") == "NASA 대시보드"

    def test_unknown_language_falls_back_to_english(self):
        assert t("page_title", "fr") == "NASA Dashboard"

    def test_blank_translation_falls_back_to_english(self, monkeypatch):
        monkeypatch.setitem(i18n._STRINGS, "half_done", {"en": "Ready", "ko": ""})
        assert t("half_done", "ko") == "Ready"

    def test_unknown_key_renders_as_itself(self):
        assert t("no_such_key", "ko") == "no_such_key"

    def test_entry_without_any_usable_text_renders_key(self, monkeypatch):
        monkeypatch.setitem(i18n._STRINGS, "orphan", {"de": "Waise"})
        assert t("orphan", "ko") == "orphan"
