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
Java Version Detection and Formatter Invocation

Detects the major version of the installed JDK and builds the `java` arguments
that run google-java-format on it.
"""

import re
from typing import Callable, List, Sequence

from gjf_action.command_executor import CommandResult
from gjf_action.errors import InvalidVersionInput, VersionParseError
from gjf_action.utils import debug_log

VERSION_NUMBER_PATTERN = re.compile(r"[0-9.]+")

# See https://github.com/google/google-java-format#jdk-16
EXPORTED_JAVAC_MODULES = ('api', 'file', 'parser', 'tree', 'util')
MODULE_EXPORTS_MIN_JAVA_VERSION = 11


def parse_java_version(banner: str) -> int:
    """
    Extracts the major Java version from the banner printed by `java -version`.

    Only the first line is considered. Legacy numbering is normalized, so
    "1.8.0_211" gives 8 and "21.0.6" gives 21.

    Raises:
        VersionParseError: If the first line has no version number
        InvalidVersionInput: If the major version is not a positive integer
    """
    first_line = banner.split('\n')[0]
    match = VERSION_NUMBER_PATTERN.search(first_line)
    if not match or not any(c.isdigit() for c in match.group(0)):
        raise VersionParseError("Cannot find Java version number")

    version_number = match.group(0)
    debug_log(f"Extracted version number: {version_number}")
    if version_number.startswith('1.'):
        version_number = version_number[len('1.'):]

    major = version_number.split('.')[0]
    if not major.isdigit() or int(major) <= 0:
        raise InvalidVersionInput(
            f"Cannot parse Java version number from '{match.group(0)}'",
            raw_version=match.group(0),
        )
    return int(major)


def get_java_version(execute: Callable[..., CommandResult]) -> int:
    """Runs `java -version` and parses the banner it writes to stderr."""
    result = execute('java', ['-version'], silent=True, ignore_return_code=False)
    debug_log(result.std_err)
    return parse_java_version(result.std_err)


def build_gjf_args(java_version: int, executable_path: str, user_args: Sequence[str] = ()) -> List[str]:
    """
    Builds the `java` arguments running the formatter jar.

    JDK 11+ hides the javac internals the formatter relies on, so their packages
    are exported to the unnamed module before `-jar`.
    """
    args: List[str] = []
    if java_version >= MODULE_EXPORTS_MIN_JAVA_VERSION:
        for module in EXPORTED_JAVAC_MODULES:
            args.extend(['--add-exports', f'jdk.compiler/com.sun.tools.javac.{module}=ALL-UNNAMED'])
    args.extend(['-jar', executable_path])
    args.extend(user_args)
    return args
