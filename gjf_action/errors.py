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
Error Taxonomy

Every failure raised by the action derives from GjfActionError. Components never
recover from these; they propagate to Main.run, which reports the message as-is
and fails the step.
"""

from typing import Optional


class GjfActionError(Exception):
    """Base class for all errors raised by the action."""
    pass


class CommandFailed(GjfActionError):
    """A subprocess exited with a nonzero code while its return code was not ignored."""
    def __init__(self, message: str, command: str, exit_code: int,
                 std_out: Optional[str] = None, std_err: Optional[str] = None):
        super().__init__(message)
        self.command = command
        self.exit_code = exit_code
        self.std_out = std_out
        self.std_err = std_err


class VersionParseError(GjfActionError):
    """The `java -version` banner did not contain a version number."""
    pass


class InvalidVersionInput(GjfActionError):
    """A version number was found but its major part is not a positive integer."""
    def __init__(self, message: str, raw_version: str):
        super().__init__(message)
        self.raw_version = raw_version


class ReleaseNotFound(GjfActionError):
    """A release required by the compatibility rules is missing upstream."""
    def __init__(self, message: str, release_name: str):
        super().__init__(message)
        self.release_name = release_name


class AssetNotFound(GjfActionError):
    """A release has no asset ending with the executable suffix."""
    pass


class ReleaseApiError(GjfActionError):
    """Release metadata could not be fetched or decoded."""
    pass
