# -
# #%L
# Google Java Format Action
# %%
# Copyright (C) 2025 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security’s commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

"""
Input File Expansion

Turns the `files` / `files-excluded` inputs into the list of paths handed to the
formatter.
"""

import glob
import os
import re
from typing import List, Optional, Sequence, Set

from gjf_action.utils import debug_log


def _split_patterns(patterns: str) -> List[str]:
    return [p.strip() for p in patterns.splitlines() if p.strip()]


def expand_files(patterns: str, root: str) -> List[str]:
    """
    Expands newline-separated glob patterns into absolute file paths.

    Patterns are relative to root unless absolute; `**` matches any number of
    directories. Directories are skipped, results are sorted and unique.
    """
    matches: Set[str] = set()
    for pattern in _split_patterns(patterns):
        full_pattern = pattern if os.path.isabs(pattern) else os.path.join(root, pattern)
        for path in glob.glob(full_pattern, recursive=True):
            if os.path.isfile(path):
                matches.add(os.path.abspath(path))
    return sorted(matches)


def _compile_exclusion(pattern: str) -> Optional[re.Pattern]:
    try:
        return re.compile(pattern)
    except re.error:
        return None


def _relative_path(path: str, root: str) -> str:
    return os.path.relpath(path, root).replace(os.sep, '/')


def get_gjf_args(args: Sequence[str], files: str, files_excluded: Optional[str], root: str) -> List[str]:
    """
    Returns the user arguments followed by every file to format.

    Args:
        args: Formatter flags from the `args` input
        files: Glob pattern(s) of files to format
        files_excluded: Glob pattern(s) of files to skip. A pattern that matches
            no file as a glob is tried as a regular expression against the
            path relative to root instead.
        root: Directory relative patterns are resolved against

    Returns:
        List[str]: args, then the remaining files in sorted order
    """
    include_files = expand_files(files, root)
    exclude_files: Set[str] = set()
    exclude_regexes: List[re.Pattern] = []
    for pattern in _split_patterns(files_excluded or ""):
        matches = expand_files(pattern, root)
        if matches:
            exclude_files.update(matches)
            continue
        regex = _compile_exclusion(pattern)
        if regex is not None:
            exclude_regexes.append(regex)

    debug_log("Files:")
    selected = []
    for file in include_files:
        relative_path = _relative_path(file, root)
        if file in exclude_files or any(regex.search(relative_path) for regex in exclude_regexes):
            debug_log(f"- {file} (excluded)")
            continue
        debug_log(f"* {file}")
        selected.append(file)
    return list(args) + selected
