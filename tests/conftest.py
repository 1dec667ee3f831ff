"""
Shared fixtures.
"""

import shutil
import stat
from pathlib import Path

import pytest


@pytest.fixture
def sh_binary() -> str:
    """Resolved path of ``sh``, the binary the driver tests are bound to."""
    sh = shutil.which("sh")
    if sh is None:
        pytest.skip("Unable to find a sh binary")
    return sh


@pytest.fixture
def executable_script(tmp_path: Path) -> Path:
    """An executable shell script echoing its arguments, one per line."""
    script = tmp_path / "echo-args"
    script.write_text('#!/bin/sh\nfor arg in "$@"; do echo "$arg"; done\n')
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script
