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
from pathlib import Path
from typing import Optional, Any, Dict, List

from gjf_action.git_handler import DEFAULT_SERVER_URL


def _log_config_message(message: str, is_error: bool = False, is_warning: bool = False):
    """A minimal logger for use only within the config module before full logging is set up."""
    # This function should have no dependencies on other project modules
    if is_error or is_warning:
        print(message, file=sys.stderr)
    else:
        print(message)


class ConfigurationError(Exception):
    """Custom exception for configuration errors."""
    pass


class Config:
    """
    Settings of one run of the action.

    Action inputs are read the way the runner exposes them, from INPUT_<NAME>
    environment variables; run context (actor, repository, workspace) comes
    from the GITHUB_* variables. Every setting is an upper-case attribute.
    """
    def __init__(self, env: Dict[str, str] = os.environ, testing: bool = False):
        self.env = env
        self.testing = testing

        # --- Preset ---
        self.VERSION = "v1.3.0"
        self.USER_AGENT = f"google-java-format-action {self.VERSION}"

        # --- Core Settings ---
        self.DEBUG_MODE = self.env.get("RUNNER_DEBUG") == "1" or self._get_bool_env("DEBUG_MODE", default=False)

        # --- Formatter Inputs ---
        self.ARGS: List[str] = (self._get_input(["args"]) or "").split()
        if testing and not self._get_input(["files"]):
            self.FILES = "**/*.java"
        else:
            self.FILES = self._get_input(["files"], required=True)
        self.FILES_EXCLUDED = self._get_input(["files-excluded"])
        self.RELEASE_NAME = self._get_input(["release-name", "version"])

        # --- Commit Inputs ---
        self.SKIP_COMMIT = self._get_bool_input(["skip-commit", "skipCommit"], default=False)
        self.COMMIT_MESSAGE = self._get_input(["commit-message", "commitMessage"])

        # --- GitHub Configuration ---
        self.GITHUB_TOKEN = self._get_input(["github-token", "githubToken"])
        self.GITHUB_ACTOR = self._get_env_var("GITHUB_ACTOR", required=False, default="")
        self.GITHUB_REPOSITORY = self._get_env_var("GITHUB_REPOSITORY", required=False, default="")
        self.GITHUB_SERVER_URL = self._get_env_var("GITHUB_SERVER_URL", required=False, default=DEFAULT_SERVER_URL)

        # --- Paths ---
        self.WORKSPACE = str(Path(self._get_env_var("GITHUB_WORKSPACE", required=False, default=os.getcwd())).resolve())
        home = self._get_env_var("HOME", required=False) or self._get_env_var("USERPROFILE", required=False, default="")
        self.EXECUTABLE_PATH = os.path.join(home, "google-java-format.jar")

        if not testing:
            self._log_initial_settings()

    def _get_env_var(self, var_name: str, required: bool = True, default: Optional[Any] = None) -> Optional[str]:
        value = self.env.get(var_name)
        if required and not value:
            raise ConfigurationError(f"Error: Required environment variable {var_name} is not set.")
        return value if value else default

    def _get_input(self, input_names: List[str], required: bool = False) -> Optional[str]:
        """
        Returns the first non-empty value among alternative names of an action input.

        Raises:
            ConfigurationError: If required and none of the names has a value
        """
        if not input_names:
            raise ConfigurationError("Error: input_names is empty")
        for input_name in input_names:
            value = self.env.get(f"INPUT_{input_name.replace(' ', '_').upper()}", "").strip()
            if self.DEBUG_MODE:
                _log_config_message(f"::debug::{'Value' if value else 'No value'} provided for input \"{input_name}\"")
            if value:
                return value
        if required:
            raise ConfigurationError(f"Error: Input required and not supplied: {input_names[0]}")
        return None

    def _get_bool_env(self, var_name: str, default: bool = False) -> bool:
        return self._get_env_var(var_name, required=False, default=str(default)).lower() == "true"

    def _get_bool_input(self, input_names: List[str], default: bool = False) -> bool:
        return (self._get_input(input_names) or str(default)).lower() == "true"

    def _log_initial_settings(self):
        if not self.DEBUG_MODE:
            return
        _log_config_message(f"::debug::Workspace: {self.WORKSPACE}")
        _log_config_message(f"::debug::Executable Path: {self.EXECUTABLE_PATH}")
        _log_config_message(f"::debug::Arguments: {self.ARGS}")
        _log_config_message(f"::debug::Files: {self.FILES}")
        _log_config_message(f"::debug::Files Excluded: {self.FILES_EXCLUDED}")
        _log_config_message(f"::debug::Release Name: {self.RELEASE_NAME}")
        _log_config_message(f"::debug::Skip Commit: {self.SKIP_COMMIT}")
        _log_config_message(f"::debug::Authenticated: {bool(self.GITHUB_TOKEN)}")


_config_instance: Optional[Config] = None


def get_config(testing: bool = False) -> Config:
    """
    Returns the singleton Config instance, creating it if necessary.

    Only the entry point should call this; components receive the Config (or the
    values they need) as arguments.

    Args:
        testing: If True, uses testing defaults for missing inputs.
                This should only be used in tests.
    """
    global _config_instance
    if _config_instance is None:
        try:
            _config_instance = Config(testing=testing)
        except ConfigurationError as e:
            _log_config_message(f"::error::{e}", is_error=True)
            sys.exit(1)
    return _config_instance


def reset_config():
    """For testing purposes only. Resets the config singleton."""
    global _config_instance
    _config_instance = None
