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

from typing import Callable, Optional
from urllib.parse import urlparse

from gjf_action.command_executor import CommandResult
from gjf_action.utils import add_mask, debug_log, log

DEFAULT_SERVER_URL = "https://github.com"


class GitOperations:
    """Git plumbing used to commit the formatted files back to the repository."""

    def __init__(self, execute: Callable[..., CommandResult], working_directory: Optional[str] = None):
        self.execute = execute
        self.working_directory = working_directory

    def _git(self, *args: str, silent: bool = True, ignore_return_code: bool = False) -> CommandResult:
        return self.execute('git', list(args), silent=silent, ignore_return_code=ignore_return_code,
                            working_directory=self.working_directory)

    def configure_git(self):
        """Configures git user name and email for the commit."""
        debug_log("Configuring Git user...")
        self._git('config', 'user.name', 'github-actions')
        self._git('config', 'user.email', '')

    def has_changes(self) -> bool:
        """Checks the working tree against HEAD. Returns True if files were modified."""
        result = self._git('diff-index', '--quiet', 'HEAD', ignore_return_code=True)
        return result.exit_code != 0

    def commit_all(self, message: str):
        """Commits all modified tracked files."""
        log(f"Committing changes with message: '{message}'")
        self._git('commit', '--all', '-m', message, silent=False)

    def push(self, repository: str, github_actor: str, github_token: Optional[str] = None,
             server_url: str = DEFAULT_SERVER_URL):
        """
        Pushes the current branch.

        Without a token, pushes to the configured remote with whatever credentials
        the checkout left behind. With a token, pushes to an authenticated URL of
        repository on the server's host.
        """
        if not github_token:
            log("Pushing changes to the default remote...")
            self._git('push', silent=False)
            return

        add_mask(github_token)
        github_host = urlparse(server_url).netloc or "github.com"
        remote_url = f"https://{github_actor}:{github_token}@{github_host}/{repository}.git"
        log(f"Pushing changes to {github_host}/{repository}...")
        self._git('push', remote_url, silent=False)
