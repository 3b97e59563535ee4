"""Tests for desktop entry building, rendering and writing."""

import stat
from unittest.mock import patch

import pytest

from opener_registry.core.desktop_entry import (
    build_entry_document,
    render_entry_document,
    write_desktop_entry,
)
from opener_registry.core.options import (
    EntryMetadata,
    RegistrationOptions,
    SecondaryAction,
)


@pytest.fixture
def full_options() -> RegistrationOptions:
    return RegistrationOptions(
        exec='sh -c "echo \'%u\' > /tmp/out; true"',
        protocols=("myapp", "org.example.myapp"),
        mimetypes=("application/x-myapp",),
        metadata=EntryMetadata(
            name="My App",
            comment="Opens myapp:// links; 100% local",
            icon="myapp",
            categories=("Network", "Utility"),
        ),
        actions=(
            SecondaryAction.quick_preview(
                "Quick preview", "myapp --preview %u", try_exec="myapp"
            ),
            SecondaryAction.open_with_terminal(
                "Open with terminal", "xterm -e myapp %u"
            ),
        ),
    )


class TestBuildEntryDocument:
    """Tests for build_entry_document."""

    def test_main_section_fields_in_order(self, options):
        document = build_entry_document(options)

        assert list(document) == ["Desktop Entry"]
        assert list(document["Desktop Entry"].items()) == [
            ("Type", "Application"),
            ("StartupNotify", "false"),
            ("Name", "App"),
            ("Comment", ""),
            ("Icon", ""),
            ("Exec", "run %u"),
            ("Categories", ""),
            ("MimeType", "x-scheme-handler/custom.scheme"),
        ]

    def test_lists_are_semicolon_joined(self, full_options):
        main = build_entry_document(full_options)["Desktop Entry"]

        assert main["Categories"] == "Network;Utility"
        assert main["MimeType"] == (
            "x-scheme-handler/myapp;"
            "x-scheme-handler/org.example.myapp;"
            "application/x-myapp"
        )
        assert main["Actions"] == "QuickPreview;OpenWithTerminal"

    def test_action_sections(self, full_options):
        document = build_entry_document(full_options)

        assert document["Desktop Action QuickPreview"] == {
            "Name": "Quick preview",
            "Exec": "myapp --preview %u",
            "TryExec": "myapp",
            "NoDisplay": "false",
        }
        assert document["Desktop Action OpenWithTerminal"] == {
            "Name": "Open with terminal",
            "Exec": "xterm -e myapp %u",
        }

    def test_no_display_true(self):
        options = RegistrationOptions(
            exec="app %u",
            protocols=("a",),
            actions=(SecondaryAction("Hidden", "Hidden", "app", no_display=True),),
        )
        document = build_entry_document(options)
        assert document["Desktop Action Hidden"]["NoDisplay"] == "true"


class TestRenderEntryDocument:
    """Tests for render_entry_document."""

    def test_values_are_written_literally(self, full_options):
        text = render_entry_document(build_entry_document(full_options))

        assert "Comment=Opens myapp:// links; 100% local\n" in text
        assert "Exec=sh -c \"echo '%u' > /tmp/out; true\"\n" in text
        assert "StartupNotify=false\n" in text
        assert " = " not in text

    def test_keys_keep_their_case(self, options):
        text = render_entry_document(build_entry_document(options))

        assert "MimeType=x-scheme-handler/custom.scheme\n" in text
        assert "mimetype=" not in text

    def test_sections_are_rendered_in_order(self, full_options):
        text = render_entry_document(build_entry_document(full_options))
        lines = text.splitlines()

        headers = [line for line in lines if line.startswith("[")]
        assert headers == [
            "[Desktop Entry]",
            "[Desktop Action QuickPreview]",
            "[Desktop Action OpenWithTerminal]",
        ]
        assert lines[0] == "[Desktop Entry]"
        assert lines[1] == "Type=Application"

    def test_empty_values_keep_their_key(self, options):
        text = render_entry_document(build_entry_document(options))
        assert "Comment=\n" in text
        assert "Icon=\n" in text


class TestWriteDesktopEntry:
    """Tests for write_desktop_entry."""

    def test_creates_registry_and_file(self, paths, options):
        target = write_desktop_entry(paths, "app1", options)

        assert target == paths.applications_dir / "app1-opener.desktop"
        assert target.read_text(encoding="utf-8").startswith("[Desktop Entry]")
        mode = stat.S_IMODE(paths.applications_dir.stat().st_mode)
        assert mode & stat.S_IRWXU == stat.S_IRWXU

    def test_overwrites_previous_entry(self, paths, options):
        write_desktop_entry(paths, "app1", options)
        updated = RegistrationOptions(
            exec="other %U", protocols=("custom.scheme",)
        )

        target = write_desktop_entry(paths, "app1", updated)

        assert "Exec=other %U" in target.read_text(encoding="utf-8")
        assert [p.name for p in paths.applications_dir.iterdir()] == [
            "app1-opener.desktop"
        ]

    def test_existing_registry_directory_is_reused(self, paths, options):
        paths.applications_dir.mkdir(parents=True)
        (paths.applications_dir / "other.desktop").write_text("[Desktop Entry]\n")

        write_desktop_entry(paths, "app1", options)

        assert sorted(p.name for p in paths.applications_dir.iterdir()) == [
            "app1-opener.desktop",
            "other.desktop",
        ]

    def test_replace_failure_leaves_no_temp_file(self, paths, options):
        with (
            patch(
                "pathlib.Path.replace",
                side_effect=PermissionError("read-only"),
            ),
            pytest.raises(PermissionError),
        ):
            write_desktop_entry(paths, "app1", options)

        assert list(paths.applications_dir.iterdir()) == []

    def test_unwritable_parent_surfaces_os_error(self, paths, options):
        paths.home.joinpath(".local").write_text("not a directory")

        with pytest.raises(OSError):
            write_desktop_entry(paths, "app1", options)
