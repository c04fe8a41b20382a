"""Target validation for .DS_Store files.

The predicate reads the current filesystem state on every call so it can
be applied both when filtering walker entries and again right before a
file is moved to the trash.
"""

import os
import stat

TARGET_NAME = ".DS_Store"


def is_target_name(name: str) -> bool:
    """Check whether a base name is exactly the target name.

    Matching is case-sensitive with no prefix, suffix or wildcard tolerance.

    Args:
        name: File base name.

    Returns:
        True if the name equals ".DS_Store".
    """
    return name == TARGET_NAME


def is_target(path: str | os.PathLike[str]) -> bool:
    """Check whether a path is an eligible .DS_Store file.

    The path must be named exactly ".DS_Store" and be a regular file.
    Directories, symlinks (to anything) and special files are rejected.
    A path that cannot be stat'ed is not a target.

    Args:
        path: Path to check.

    Returns:
        True if the path is a regular file named ".DS_Store".
    """
    if not is_target_name(os.path.basename(os.fspath(path))):
        return False

    try:
        mode = os.lstat(path).st_mode
    except OSError:
        return False

    return stat.S_ISREG(mode)
