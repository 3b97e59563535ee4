"""Desktop entry serialization for protocol handler registrations.

Builds the "[Desktop Entry]" document for a set of RegistrationOptions
and commits it to the user's application registry following the
freedesktop.org desktop entry specification.

Values are written literally. update-desktop-database parses the file as
plain key/value text, so the writer must not interpolate "%" (the Exec
field codes), treat ";" as an inline comment (the list separator), change
key case, or pad the "=" delimiter.
"""

import configparser
import contextlib
import io
import tempfile
from pathlib import Path

from opener_registry.config.paths import XdgPaths, desktop_filename
from opener_registry.constants import (
    DESKTOP_ACTION_SECTION_PREFIX,
    DESKTOP_ENTRY_SECTION,
    DESKTOP_ENTRY_TYPE,
    DESKTOP_FILE_MODE,
    DESKTOP_LIST_SEPARATOR,
    USER_APPLICATIONS_DIR_MODE,
)
from opener_registry.core.options import RegistrationOptions, SecondaryAction
from opener_registry.logger import get_logger

logger = get_logger(__name__)

# Section name -> ordered key/value mapping
EntryDocument = dict[str, dict[str, str]]


def _join(values: list[str] | tuple[str, ...]) -> str:
    return DESKTOP_LIST_SEPARATOR.join(values)


def _action_section(action: SecondaryAction) -> dict[str, str]:
    section = {"Name": action.name, "Exec": action.exec}
    if action.try_exec:
        section["TryExec"] = action.try_exec
    if action.no_display is not None:
        section["NoDisplay"] = "true" if action.no_display else "false"
    return section


def build_entry_document(options: RegistrationOptions) -> EntryDocument:
    """Build the entry document for already validated options.

    Args:
        options: Registration options

    Returns:
        Ordered mapping of section name to key/value pairs

    """
    meta = options.metadata
    main: dict[str, str] = {
        "Type": DESKTOP_ENTRY_TYPE,
        "StartupNotify": "false",
        "Name": meta.name,
        "Comment": meta.comment,
        "Icon": meta.icon,
        "Exec": options.exec,
        "Categories": _join(meta.categories),
        "MimeType": _join(options.all_mimetypes()),
    }
    if options.actions:
        main["Actions"] = _join([a.action_id for a in options.actions])

    document: EntryDocument = {DESKTOP_ENTRY_SECTION: main}
    for action in options.actions:
        section_name = f"{DESKTOP_ACTION_SECTION_PREFIX}{action.action_id}"
        document[section_name] = _action_section(action)
    return document


def _literal_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        interpolation=None,
        delimiters=("=",),
        comment_prefixes=(),
        inline_comment_prefixes=None,
        strict=True,
        default_section="__opener_registry_unused__",
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def render_entry_document(document: EntryDocument) -> str:
    """Render an entry document as desktop entry text.

    Args:
        document: Document from build_entry_document()

    Returns:
        File contents

    """
    parser = _literal_parser()
    parser.read_dict(document)
    buffer = io.StringIO()
    parser.write(buffer, space_around_delimiters=False)
    return buffer.getvalue()


def write_desktop_entry(
    paths: XdgPaths,
    registration_id: str,
    options: RegistrationOptions,
) -> Path:
    """Write "<id>-opener.desktop" into the application registry.

    The registry directory is created (owner-only) if absent. The file is
    written to a temporary sibling and moved into place, replacing any
    previous entry for the same id.

    Args:
        paths: Per-user path layout
        registration_id: Unique registration identifier
        options: Validated registration options

    Returns:
        Path of the written entry file

    Raises:
        OSError: On any filesystem failure

    """
    content = render_entry_document(build_entry_document(options))

    applications_dir = paths.applications_dir
    applications_dir.mkdir(
        mode=USER_APPLICATIONS_DIR_MODE, parents=True, exist_ok=True
    )

    filename = desktop_filename(registration_id)
    target = applications_dir / filename

    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=applications_dir,
        prefix=f".{filename}.",
        suffix=".tmp",
        delete=False,
    ) as tmp_file:
        temp_path = Path(tmp_file.name)
        try:
            tmp_file.write(content)
            tmp_file.flush()
        except OSError:
            tmp_file.close()
            with contextlib.suppress(OSError):
                temp_path.unlink()
            raise

    try:
        temp_path.chmod(DESKTOP_FILE_MODE)
        temp_path.replace(target)
    except OSError:
        with contextlib.suppress(OSError):
            temp_path.unlink()
        raise

    logger.debug("Wrote desktop entry %s", target)
    return target
