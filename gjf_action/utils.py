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

import os
import sys
import platform
import contextlib
from typing import Iterator, List

# Values registered through add_mask, replaced by *** in everything we print
_masked_values: List[str] = []


def tail_string(text: str, max_length: int, prefix: str = "...[Content truncated]...\n") -> str:
    """Tail a string to a maximum length, keeping the end portion.

    Args:
        text: The string to truncate
        max_length: Maximum length of the resulting string
        prefix: Optional prefix to add when truncating (default: "...[Content truncated]...\n")

    Returns:
        str: The original string if within max_length, or truncated string with prefix indicator
    """
    if len(text) <= max_length:
        return text

    remaining_length = max_length - len(prefix)
    if remaining_length <= 0:
        return prefix[:max_length]

    return prefix + text[-remaining_length:]


def safe_print(message, file=None, flush=True):
    """Safely print message, handling encoding issues on Windows runners."""
    try:
        print(message, file=file, flush=flush)
    except UnicodeEncodeError:
        if platform.system() == 'Windows':
            message = ''.join([c if ord(c) < 128 else '?' for c in message])

        print(message, file=file, flush=flush)


def add_mask(value: str):
    """Registers a secret with the runner and masks it in our own output."""
    if not value or value in _masked_values:
        return
    _masked_values.append(value)
    safe_print(f"::add-mask::{value}")


def clear_masks():
    """For testing purposes only. Forgets all registered secrets."""
    _masked_values.clear()


def mask(message: str) -> str:
    """Replaces every registered secret in message with ***."""
    for value in _masked_values:
        message = message.replace(value, "***")
    return message


def is_debug() -> bool:
    """True when the runner has step debug logging on, or DEBUG_MODE is set."""
    return os.environ.get("RUNNER_DEBUG") == "1" or os.environ.get("DEBUG_MODE", "").lower() == "true"


def log(message: str, is_error: bool = False, is_warning: bool = False):
    """Prints a message, as a workflow annotation for warnings and errors."""
    message = mask(message)
    if is_error:
        safe_print(f"::error::{message}", file=sys.stderr, flush=True)
    elif is_warning:
        safe_print(f"::warning::{message}", flush=True)
    else:
        safe_print(message, flush=True)


def debug_log(*args):
    """Prints only if debug output is enabled."""
    if not is_debug():
        return
    message = mask(" ".join(map(str, args)))
    for line in message.splitlines() or [""]:
        safe_print(f"::debug::{line}", flush=True)


@contextlib.contextmanager
def group(title: str) -> Iterator[None]:
    """Folds everything logged inside the block under a collapsible group in the job log."""
    safe_print(f"::group::{mask(title)}", flush=True)
    try:
        yield
    finally:
        safe_print("::endgroup::", flush=True)


def set_failed(message: str):
    """Reports a failure of the step and exits with code 1."""
    log(str(message), is_error=True)
    sys.exit(1)
