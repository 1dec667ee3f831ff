"""
Executable resolution.

Finds the first usable binary among a list of candidate names or paths.
"""

import os
import shutil
from typing import Iterable, Sequence, Union

from ..utils import ExecutableNotFoundError, get_logger

logger = get_logger(__name__)

Candidates = Union[str, os.PathLike, Sequence[Union[str, os.PathLike]]]


def normalize_candidates(candidates: Candidates) -> list[str]:
    """Turn a single candidate or a sequence of candidates into a list of strings."""
    if isinstance(candidates, (str, os.PathLike)):
        return [os.fspath(candidates)]
    return [os.fspath(candidate) for candidate in candidates]


def find_executable(candidates: Candidates, extra_dirs: Iterable[str] = ()) -> str:
    """
    Resolve the first executable among the candidates.

    A candidate with a directory component is checked as is; a bare name is
    looked up on PATH, then in extra_dirs.

    Args:
        candidates: Binary name/path or a sequence of them, tried in order
        extra_dirs: Additional directories searched for bare names

    Returns:
        Path of the first candidate that resolves

    Raises:
        ExecutableNotFoundError: If no candidate resolves
    """
    names = normalize_candidates(candidates)
    extra_path = os.pathsep.join(extra_dirs)

    for name in names:
        found = shutil.which(name)
        if found is None and extra_path and not os.path.dirname(name):
            found = shutil.which(name, path=extra_path)
        if found is not None:
            logger.debug(f"Resolved executable {name!r} to {found}")
            return found
        logger.debug(f"Executable {name!r} not found")

    raise ExecutableNotFoundError(
        f"Executable not found, proposed: {', '.join(names)}",
        candidates=names,
    )
