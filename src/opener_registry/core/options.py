"""Registration options and their validation.

RegistrationOptions describes the application to register: display
metadata, the Exec command template, the protocols and MIME types it
handles, and optional secondary actions exposed on the same entry.
"""

import re
from dataclasses import dataclass, field

from opener_registry.constants import (
    ACTION_ID_PATTERN,
    ACTION_OPEN_WITH_TERMINAL,
    ACTION_QUICK_PREVIEW,
    SCHEME_HANDLER_MIME_PREFIX,
    URL_PLACEHOLDERS,
)
from opener_registry.exceptions import ValidationError


@dataclass(frozen=True)
class EntryMetadata:
    """Display metadata for the desktop entry."""

    name: str = ""
    comment: str = ""
    icon: str = ""
    categories: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", tuple(self.categories))


@dataclass(frozen=True)
class SecondaryAction:
    """Named sub-command exposed alongside the entry's main Exec.

    Attributes:
        action_id: Identifier used in "[Desktop Action <action_id>]"
        name: Display name
        exec: Command line for the action
        try_exec: Optional executable checked before showing the action
        no_display: Written as NoDisplay when not None

    """

    action_id: str
    name: str
    exec: str
    try_exec: str | None = None
    no_display: bool | None = None

    @classmethod
    def quick_preview(
        cls,
        name: str,
        exec: str,  # noqa: A002
        try_exec: str | None = None,
        no_display: bool = False,  # noqa: FBT001, FBT002
    ) -> "SecondaryAction":
        """Build the stock QuickPreview action."""
        return cls(ACTION_QUICK_PREVIEW, name, exec, try_exec, no_display)

    @classmethod
    def open_with_terminal(
        cls,
        name: str,
        exec: str,  # noqa: A002
    ) -> "SecondaryAction":
        """Build the stock OpenWithTerminal action."""
        return cls(ACTION_OPEN_WITH_TERMINAL, name, exec)


@dataclass(frozen=True)
class RegistrationOptions:
    """Everything needed to register an application as a URL handler."""

    exec: str
    protocols: tuple[str, ...]
    metadata: EntryMetadata = field(default_factory=EntryMetadata)
    mimetypes: tuple[str, ...] = ()
    actions: tuple[SecondaryAction, ...] = ()
    no_url_arg_necessary: bool = False

    def __post_init__(self) -> None:
        # Accept lists from callers while keeping the instance hashable
        for name in ("protocols", "mimetypes", "actions"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def scheme_mimetypes(self) -> list[str]:
        """Return "x-scheme-handler/<scheme>" for each protocol, in order."""
        return [
            f"{SCHEME_HANDLER_MIME_PREFIX}{protocol}"
            for protocol in self.protocols
        ]

    def all_mimetypes(self) -> list[str]:
        """Return scheme MIME types followed by literal MIME types.

        The order is the argument order handed to xdg-mime.
        """
        return [*self.scheme_mimetypes(), *self.mimetypes]


def validate_registration_id(registration_id: str) -> None:
    """Reject ids that cannot name a file in the application registry.

    Raises:
        ValidationError: If the id is empty or contains a path separator

    """
    if not registration_id:
        msg = (
            "you must specify a non-empty id that uniquely identifies "
            "this registration"
        )
        raise ValidationError(msg)
    if "/" in registration_id or registration_id in (".", ".."):
        msg = "id must not contain a path separator"
        raise ValidationError(msg, target=registration_id)


def validate_registration(
    registration_id: str, options: RegistrationOptions
) -> None:
    """Reject unusable options before anything touches the filesystem.

    Args:
        registration_id: Unique registration identifier
        options: Options to check

    Raises:
        ValidationError: On the first problem found

    """
    validate_registration_id(registration_id)
    if not options.protocols:
        msg = "you must specify at least one protocol"
        raise ValidationError(msg, target=registration_id)
    if any(not protocol for protocol in options.protocols):
        msg = "protocol names must not be empty"
        raise ValidationError(msg, target=registration_id)
    if not options.exec:
        msg = (
            "you must specify an Exec command; it runs when the "
            "application is invoked through a registered URL"
        )
        raise ValidationError(msg, target=registration_id)
    if not options.no_url_arg_necessary and not any(
        token in options.exec for token in URL_PLACEHOLDERS
    ):
        msg = (
            "Exec does not contain %u or %U, the placeholder for the URL "
            "the application is called with; set no_url_arg_necessary "
            "if this is intended"
        )
        raise ValidationError(msg, target=registration_id)

    _validate_actions(registration_id, options.actions)
    _validate_single_line(registration_id, options)


def _validate_actions(
    registration_id: str, actions: tuple[SecondaryAction, ...]
) -> None:
    seen: set[str] = set()
    for action in actions:
        if not action.action_id:
            msg = "secondary actions need a non-empty action_id"
            raise ValidationError(msg, target=registration_id)
        if not re.fullmatch(ACTION_ID_PATTERN, action.action_id):
            msg = (
                f"secondary action id {action.action_id!r} may only contain "
                "letters, digits and '-'"
            )
            raise ValidationError(msg, target=registration_id)
        if action.action_id in seen:
            msg = f"duplicate secondary action id {action.action_id!r}"
            raise ValidationError(msg, target=registration_id)
        if not action.name or not action.exec:
            msg = f"secondary action {action.action_id!r} needs Name and Exec"
            raise ValidationError(msg, target=registration_id)
        seen.add(action.action_id)


def _validate_single_line(
    registration_id: str, options: RegistrationOptions
) -> None:
    """Desktop entry values are single lines; a newline would split the key."""
    meta = options.metadata
    values = [
        options.exec,
        meta.name,
        meta.comment,
        meta.icon,
        *meta.categories,
        *options.protocols,
        *options.mimetypes,
    ]
    for action in options.actions:
        values.extend((action.action_id, action.name, action.exec))
        if action.try_exec:
            values.append(action.try_exec)

    for value in values:
        if "\n" in value or "\r" in value:
            msg = f"value {value!r} must not contain line breaks"
            raise ValidationError(msg, target=registration_id)
