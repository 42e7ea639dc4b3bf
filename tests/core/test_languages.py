"""
Languages レジストリのテスト
"""

from __future__ import annotations

import dataclasses

import pytest

from mdlocale.languages import LanguageInfo, Languages, Region


class TestLanguageLookup:
    """言語情報の取得"""

    def test_supported_codes(self):
        assert Languages.is_supported("en") is True
        assert Languages.is_supported("zh-cn") is True
        assert Languages.is_supported("pt-br") is True

    def test_unsupported_codes(self):
        assert Languages.is_supported("xx") is False
        assert Languages.is_supported("") is False
        assert Languages.is_supported(None) is False

    def test_get_info(self):
        info = Languages.get_info("fr-ca")
        assert info == LanguageInfo("fr-ca", "French Canadian", Region.AMERICAS, False)

    def test_get_info_unknown_is_none(self):
        assert Languages.get_info("xx") is None

    def test_info_is_immutable(self):
        info = Languages.get_info("en")
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.name = "Changed"  # type: ignore[misc]

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            Languages._LANGUAGES["xx"] = Languages.get_info("en")  # type: ignore[index]

    def test_display_name_falls_back_to_code(self):
        assert Languages.get_display_name("ja") == "Japanese"
        assert Languages.get_display_name("xx") == "xx"

    def test_all_codes_count(self):
        assert len(Languages.list_codes()) == 25


class TestRegions:
    """地域区分"""

    def test_five_regions(self):
        assert len(list(Region)) == 5

    def test_languages_by_region(self):
        assert set(Languages.get_languages_by_region(Region.SOUTHERN_AFRICA)) == {"sw", "zu"}
        assert set(Languages.get_languages_by_region(Region.AMERICAS)) == {
            "en",
            "es",
            "pt-br",
            "fr-ca",
        }

    def test_every_language_in_exactly_one_region(self):
        seen = []
        for region in Region:
            seen.extend(Languages.get_languages_by_region(region))
        assert sorted(seen) == sorted(Languages.list_codes())

    def test_region_from_value(self):
        assert Region("Middle East & North Africa") is Region.MIDDLE_EAST_NORTH_AFRICA


class TestDirectionAndDefaults:
    """書字方向とデフォルト言語"""

    @pytest.mark.parametrize("code", ["ar", "he", "fa", "ku"])
    def test_right_to_left(self, code):
        assert Languages.is_right_to_left(code) is True

    def test_left_to_right(self):
        assert Languages.is_right_to_left("en") is False
        assert Languages.is_right_to_left("tr") is False

    def test_unknown_code_is_not_rtl(self):
        assert Languages.is_right_to_left("xx") is False

    def test_default_source_language(self):
        assert Languages.default_source_language() == "en"
        assert Languages.default_source_language() == Languages.default_source_language()


class TestNormalize:
    """言語コードの正規化"""

    def test_case_and_separator(self):
        assert Languages.normalize("PT_BR") == "pt-br"
        assert Languages.normalize("ZH-CN") == "zh-cn"
        assert Languages.normalize(" de ") == "de"

    def test_aliases(self):
        assert Languages.normalize("zh") == "zh-cn"
        assert Languages.normalize("zh-Hans") == "zh-cn"
        assert Languages.normalize("iw") == "he"
        assert Languages.normalize("fil") == "tl"

    def test_unknown_returns_none(self):
        assert Languages.normalize("klingon") is None
        assert Languages.normalize("") is None
        assert Languages.normalize(None) is None

    def test_unknown_is_logged(self, caplog):
        with caplog.at_level("DEBUG", logger="mdlocale.languages"):
            Languages.normalize("unknown-code-for-log-test")
        assert "unknown-code-for-log-test" in caplog.text
