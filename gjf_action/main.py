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
Entry point of the action: download google-java-format for the installed JDK,
format the requested files and commit the result.
"""

from typing import Callable, List, Optional

from gjf_action.command_executor import CommandResult, execute as default_execute
from gjf_action.config import Config, get_config
from gjf_action.errors import AssetNotFound
from gjf_action.files import get_gjf_args
from gjf_action.git_handler import GitOperations
from gjf_action.java_version import build_gjf_args, get_java_version
from gjf_action.releases import ReleaseData, Releases, create_releases
from gjf_action.utils import add_mask, debug_log, group, log, set_failed

DEFAULT_COMMIT_MESSAGE = "Google Java Format"


class Main:
    """Runs the steps of the action in order. Any failure fails the step."""

    def __init__(self, config: Config, execute: Callable[..., CommandResult] = default_execute,
                 releases: Optional[Releases] = None, git_operations: Optional[GitOperations] = None):
        self.config = config
        self.execute = execute
        self.github_token = config.GITHUB_TOKEN
        self.executable_path = config.EXECUTABLE_PATH
        self.workspace = config.WORKSPACE
        if self.github_token:
            add_mask(self.github_token)
        self.releases = releases or create_releases(execute, self.github_token, user_agent=config.USER_AGENT)
        self.git_operations = git_operations or GitOperations(execute, working_directory=self.workspace)

    def get_java_version(self) -> int:
        java_version = get_java_version(self.execute)
        log(f"Version of JDK: {java_version}")
        return java_version

    def execute_gjf(self, java_version: int, user_args: Optional[List[str]] = None) -> CommandResult:
        """Runs the downloaded formatter with user_args on the given JDK."""
        args = build_gjf_args(java_version, self.executable_path, user_args or [])
        return self.execute('java', args, silent=False, ignore_return_code=False,
                            working_directory=self.workspace)

    def get_release_data(self, java_version: int, release_name: Optional[str]) -> ReleaseData:
        """
        Returns the requested release, or the latest one compatible with the JDK.

        A requested release that does not exist is not fatal: a warning is logged
        and the compatible release is used instead.
        """
        if release_name:
            release = self.releases.get_release_data_by_name(release_name)
            if release is not None:
                return release
            log(
                f"Version \"{release_name}\" of Google Java Format cannot be found. "
                "Fallback to latest compatible release.",
                is_warning=True
            )
        return self.releases.get_latest_release_data(java_version)

    def get_download_url(self, release: ReleaseData) -> str:
        asset = release.find_executable_asset()
        if asset is None or not asset.browser_download_url:
            raise AssetNotFound("Cannot find URL to Google Java Format executable")
        return asset.browser_download_url

    def download_executable(self, download_url: str):
        log(f"Downloading executable to {self.executable_path}")
        self.execute('curl', ['-sL', download_url, '-o', self.executable_path], ignore_return_code=False)

    def commit_changes(self, commit_message: Optional[str], github_actor: str, repository: str):
        """Commits and pushes the formatted files, if the formatter changed any."""
        self.git_operations.configure_git()
        if not self.git_operations.has_changes():
            log("Nothing to commit!")
            return
        self.git_operations.commit_all(commit_message or DEFAULT_COMMIT_MESSAGE)
        self.git_operations.push(
            repository=repository,
            github_actor=github_actor,
            github_token=self.github_token,
            server_url=self.config.GITHUB_SERVER_URL,
        )

    def run(self):
        try:
            java_version = self.get_java_version()

            # Get Google Java Format executable and save it to executable_path
            with group("Download Google Java Format"):
                release = self.get_release_data(java_version, self.config.RELEASE_NAME)
                log(f"Using Google Java Format {release.name}")
                download_url = self.get_download_url(release)
                self.download_executable(download_url)
                self.execute_gjf(java_version, ['--version'])

            # Execute Google Java Format with provided arguments
            args = get_gjf_args(
                self.config.ARGS,
                files=self.config.FILES,
                files_excluded=self.config.FILES_EXCLUDED,
                root=self.workspace,
            )
            debug_log(f"Arguments: {args}")
            if len(args) == len(self.config.ARGS):
                log(f"No files match '{self.config.FILES}'. Nothing to format.", is_warning=True)
            else:
                self.execute_gjf(java_version, args)

            # Commit changed files if there are any and if skip-commit != true
            if not self.config.SKIP_COMMIT:
                with group("Commit changes"):
                    self.commit_changes(
                        commit_message=self.config.COMMIT_MESSAGE,
                        github_actor=self.config.GITHUB_ACTOR,
                        repository=self.config.GITHUB_REPOSITORY,
                    )
        except Exception as e:
            set_failed(str(e))


def main():
    config = get_config()
    Main(config).run()


if __name__ == "__main__":
    main()
