"""Tests for mimeapps.list cleanup."""

import pytest

from opener_registry.core.default_apps import (
    DefaultAppsList,
    purge_default_references,
)
from opener_registry.exceptions import DefaultAppsListError

MIMEAPPS = """\
[Default Applications]
x-scheme-handler/custom.scheme=app1-opener.desktop
x-scheme-handler/http=firefox.desktop
x-scheme-handler/other=app1-opener.desktop;
text/html=firefox.desktop

[Added Associations]
x-scheme-handler/custom.scheme=app1-opener.desktop;
"""


class TestPurgeDefaultReferences:
    """Tests for purge_default_references."""

    def test_removes_every_matching_key(self, write_mimeapps):
        mimeapps = write_mimeapps(MIMEAPPS)

        removed = purge_default_references(mimeapps, "app1-opener.desktop")

        assert removed == [
            "x-scheme-handler/custom.scheme",
            "x-scheme-handler/other",
        ]
        text = mimeapps.read_text(encoding="utf-8")
        assert "x-scheme-handler/http=firefox.desktop\n" in text
        assert "text/html=firefox.desktop\n" in text
        default_section = text.split("[Added Associations]")[0]
        assert "app1-opener.desktop" not in default_section

    def test_other_sections_are_kept(self, write_mimeapps):
        mimeapps = write_mimeapps(MIMEAPPS)

        purge_default_references(mimeapps, "app1-opener.desktop")

        text = mimeapps.read_text(encoding="utf-8")
        assert "[Added Associations]\n" in text
        assert (
            "x-scheme-handler/custom.scheme=app1-opener.desktop;" in text
        )

    def test_missing_file_is_a_no_op(self, paths):
        removed = purge_default_references(
            paths.mimeapps_list, "app1-opener.desktop"
        )

        assert removed == []
        assert not paths.mimeapps_list.exists()

    def test_missing_section_is_a_no_op(self, write_mimeapps):
        content = "[Added Associations]\ntext/html=firefox.desktop;\n"
        mimeapps = write_mimeapps(content)

        removed = purge_default_references(mimeapps, "app1-opener.desktop")

        assert removed == []
        assert mimeapps.read_text(encoding="utf-8") == content

    def test_no_match_leaves_file_untouched(self, write_mimeapps):
        content = "[Default Applications]\n# keep me\ntext/html=firefox.desktop\n"
        mimeapps = write_mimeapps(content)

        removed = purge_default_references(mimeapps, "app1-opener.desktop")

        assert removed == []
        assert mimeapps.read_text(encoding="utf-8") == content

    def test_similar_filenames_are_not_removed(self, write_mimeapps):
        mimeapps = write_mimeapps(
            "[Default Applications]\n"
            "x-scheme-handler/a=app10-opener.desktop\n"
            "x-scheme-handler/b=app1-opener.desktop\n"
        )

        removed = purge_default_references(mimeapps, "app1-opener.desktop")

        assert removed == ["x-scheme-handler/b"]
        assert "app10-opener.desktop" in mimeapps.read_text(encoding="utf-8")

    def test_comments_and_blank_lines_survive(self, write_mimeapps):
        mimeapps = write_mimeapps(
            "# managed by me\n"
            "[Default Applications]\n"
            "# browser\n"
            "text/html=firefox.desktop\n"
            "x-scheme-handler/custom.scheme=app1-opener.desktop\n"
            "\n"
            "[Added Associations]\n"
            "text/html=firefox.desktop;\n"
        )

        removed = purge_default_references(mimeapps, "app1-opener.desktop")

        assert removed == ["x-scheme-handler/custom.scheme"]
        assert mimeapps.read_text(encoding="utf-8") == (
            "# managed by me\n"
            "[Default Applications]\n"
            "# browser\n"
            "text/html=firefox.desktop\n"
            "\n"
            "[Added Associations]\n"
            "text/html=firefox.desktop;\n"
        )

    def test_duplicate_sections_and_keys_are_kept(self, write_mimeapps):
        mimeapps = write_mimeapps(
            "[Default Applications]\n"
            "text/html=firefox.desktop\n"
            "x-scheme-handler/custom.scheme=app1-opener.desktop\n"
            "[Default Applications]\n"
            "text/html=chromium.desktop\n"
            "x-scheme-handler/custom.scheme = app1-opener.desktop;\n"
        )

        removed = purge_default_references(mimeapps, "app1-opener.desktop")

        assert removed == ["x-scheme-handler/custom.scheme"]
        assert mimeapps.read_text(encoding="utf-8") == (
            "[Default Applications]\n"
            "text/html=firefox.desktop\n"
            "[Default Applications]\n"
            "text/html=chromium.desktop\n"
        )

    def test_unparsable_file_raises(self, write_mimeapps):
        mimeapps = write_mimeapps("text/html=firefox.desktop\n")

        with pytest.raises(DefaultAppsListError):
            purge_default_references(mimeapps, "app1-opener.desktop")


class TestDefaultAppsList:
    """Tests for DefaultAppsList."""

    def test_load_returns_none_for_missing_file(self, paths):
        assert DefaultAppsList.load(paths.mimeapps_list) is None

    def test_keys_referencing_is_case_preserving(self, write_mimeapps):
        mimeapps = write_mimeapps(
            "[Default Applications]\n"
            "application/X-Custom=app1-opener.desktop\n"
        )
        default_apps = DefaultAppsList.load(mimeapps)

        assert default_apps is not None
        assert default_apps.keys_referencing("app1-opener.desktop") == [
            "application/X-Custom"
        ]

    def test_save_writes_without_padding(self, write_mimeapps):
        mimeapps = write_mimeapps(MIMEAPPS)
        default_apps = DefaultAppsList.load(mimeapps)

        default_apps.remove_references("app1-opener.desktop")
        default_apps.save()

        assert " = " not in mimeapps.read_text(encoding="utf-8")
