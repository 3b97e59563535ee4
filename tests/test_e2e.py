"""End-to-end test against the real xdg-utils tools.

Runs only when OPENER_REGISTRY_E2E=1 and xdg-mime, xdg-open and
update-desktop-database are on PATH. HOME and the XDG directories point
at a throwaway home, so the user's real associations are never touched.
"""

import os
import shlex
import shutil
import subprocess
import time

import pytest

from opener_registry import EntryMetadata, ProtocolRegistrar, RegistrationOptions

REQUIRED_TOOLS = ("xdg-mime", "xdg-open", "update-desktop-database")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.getenv("OPENER_REGISTRY_E2E") != "1"
        or any(shutil.which(tool) is None for tool in REQUIRED_TOOLS),
        reason="set OPENER_REGISTRY_E2E=1 with xdg-utils installed",
    ),
]


def _wait_for(path, timeout=10.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if path.exists() and path.read_text().strip():
            return path.read_text().strip()
        time.sleep(0.1)
    return None


def test_open_url_reaches_registered_handler(home, tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / ".local" / "share"))

    sentinel = tmp_path / "opened-url"
    script = tmp_path / "record-url.sh"
    script.write_text(
        f'#!/bin/sh\nprintf "%s" "$1" > {shlex.quote(str(sentinel))}\n'
    )
    script.chmod(0o755)

    registrar = ProtocolRegistrar.create_default()
    registrar.register(
        "e2etest",
        RegistrationOptions(
            exec=f"{script} %u",
            protocols=("opener-e2e",),
            metadata=EntryMetadata(name="E2E Recorder"),
        ),
    )

    subprocess.run(["xdg-open", "opener-e2e://hello"], check=True, timeout=30)
    assert _wait_for(sentinel) == "opener-e2e://hello"

    registrar.unregister("e2etest")
    query = subprocess.run(
        ["xdg-mime", "query", "default", "x-scheme-handler/opener-e2e"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert "e2etest-opener.desktop" not in query.stdout
