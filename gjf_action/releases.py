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
Google Java Format Releases

Looks up release metadata of google/google-java-format on the GitHub REST API.
Two transports fetch the same JSON: a plain `curl` call, which needs no
credentials but is rate-limited, and an authenticated requests session used
when a GitHub token is available. Releases picks the release matching the
installed JDK and does not care which transport is behind it.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import requests

from gjf_action.command_executor import CommandResult
from gjf_action.errors import ReleaseApiError, ReleaseNotFound
from gjf_action.utils import debug_log, log

GJF_REPO_OWNER = "google"
GJF_REPO_NAME = "google-java-format"
API_RELEASES = f"https://api.github.com/repos/{GJF_REPO_OWNER}/{GJF_REPO_NAME}/releases"

EXECUTABLE_ASSET_SUFFIX = "all-deps.jar"

# (threshold, release name): the first rule with java_version < threshold wins,
# newer JDKs get the latest release.
COMPATIBILITY_RULES = (
    (11, "1.7"),
    (17, "v1.24.0"),
    (21, "v1.28.0"),
)

REQUEST_TIMEOUT = 30


def build_releases_url(path: Optional[str] = None) -> str:
    """Returns the releases endpoint, optionally suffixed with a path. Never ends with a slash."""
    if not path or not str(path).strip('/'):
        return API_RELEASES
    return f"{API_RELEASES}/{str(path).strip('/')}"


@dataclass(frozen=True)
class Asset:
    name: str
    browser_download_url: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Asset":
        return cls(name=data.get("name", ""), browser_download_url=data.get("browser_download_url", ""))


@dataclass(frozen=True)
class ReleaseData:
    """One published release of google-java-format and its downloadable assets."""
    name: str
    id: int
    tag_name: str = ""
    assets: List[Asset] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ReleaseData":
        if not isinstance(data, dict):
            raise ReleaseApiError(f"Unexpected release data from GitHub API: {data!r}")
        return cls(
            name=data.get("name") or "",
            id=data.get("id", 0),
            tag_name=data.get("tag_name") or "",
            assets=[Asset.from_json(asset) for asset in data.get("assets") or []],
        )

    def find_executable_asset(self) -> Optional[Asset]:
        """Returns the self-contained jar of this release, if it was published."""
        for asset in self.assets:
            if asset.name.endswith(EXECUTABLE_ASSET_SUFFIX):
                return asset
        return None


class ReleaseTransport(ABC):
    """Fetches raw release JSON from the GitHub releases endpoints."""

    @abstractmethod
    def list_releases(self) -> List[Dict[str, Any]]:
        ...

    @abstractmethod
    def get_latest_release(self) -> Dict[str, Any]:
        ...


def _check_release_list(data: Any, url: str) -> List[Dict[str, Any]]:
    # The API answers with an error object (e.g. rate limit exceeded) instead of a list
    if not isinstance(data, list):
        message = data.get("message") if isinstance(data, dict) else data
        raise ReleaseApiError(f"Unexpected response from {url}: {message}")
    return data


def _check_release_object(data: Any, url: str) -> Dict[str, Any]:
    # Error objects still decode to a dict, so look for the release fields
    if not isinstance(data, dict) or "message" in data or "id" not in data or "assets" not in data:
        message = data.get("message") if isinstance(data, dict) else data
        raise ReleaseApiError(f"Unexpected response from {url}: {message}")
    return data


class CurlReleaseTransport(ReleaseTransport):
    """Calls the public endpoints through curl, without credentials."""

    def __init__(self, execute: Callable[..., CommandResult]):
        self.execute = execute

    def _call_releases_api(self, path: Optional[str] = None) -> Any:
        url = build_releases_url(path)
        debug_log(f"URL: {url}")
        response = self.execute('curl', ['-sL', url], ignore_return_code=False)
        try:
            return json.loads(response.std_out)
        except json.JSONDecodeError as e:
            raise ReleaseApiError(f"Cannot decode JSON response from {url}: {e}") from e

    def list_releases(self) -> List[Dict[str, Any]]:
        return _check_release_list(self._call_releases_api(), API_RELEASES)

    def get_latest_release(self) -> Dict[str, Any]:
        return _check_release_object(self._call_releases_api("latest"), build_releases_url("latest"))


class RestReleaseTransport(ReleaseTransport):
    """Calls the endpoints through an authenticated requests session."""

    def __init__(self, github_token: str, session: Optional[requests.Session] = None,
                 user_agent: str = "google-java-format-action"):
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {github_token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": user_agent,
        })

    def _get(self, path: Optional[str] = None) -> Any:
        url = build_releases_url(path)
        debug_log(f"Making GET request to: {url}")
        try:
            response = self.session.get(url, timeout=REQUEST_TIMEOUT)
            debug_log(f"GitHub API response status code: {response.status_code}")
            response.raise_for_status()
            return response.json()
        except requests.exceptions.HTTPError as e:
            raise ReleaseApiError(
                f"HTTP error calling {url}: {e.response.status_code} - {e.response.text}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise ReleaseApiError(f"Request error calling {url}: {e}") from e
        except ValueError as e:
            raise ReleaseApiError(f"Cannot decode JSON response from {url}: {e}") from e

    def list_releases(self) -> List[Dict[str, Any]]:
        return _check_release_list(self._get(), API_RELEASES)

    def get_latest_release(self) -> Dict[str, Any]:
        return _check_release_object(self._get("latest"), build_releases_url("latest"))


class Releases:
    """Resolves which release of google-java-format to use."""

    def __init__(self, transport: ReleaseTransport):
        self.transport = transport

    def get_all_release_data(self) -> List[ReleaseData]:
        """Returns all releases in the order GitHub lists them."""
        return [ReleaseData.from_json(data) for data in self.transport.list_releases()]

    def get_release_data_by_name(self, release_name: str) -> Optional[ReleaseData]:
        """Returns the first release named exactly release_name, or None."""
        for release in self.get_all_release_data():
            if release.name == release_name:
                return release
        return None

    def get_latest_release_data(self, java_version: int) -> ReleaseData:
        """
        Returns the newest release that runs on the given JDK.

        Raises:
            ReleaseNotFound: If the release pinned for an older JDK is not listed upstream
        """
        for threshold, release_name in COMPATIBILITY_RULES:
            if java_version < threshold:
                log(
                    f"Latest versions of Google Java Format require Java SDK {threshold} min. "
                    f"Fallback to Google Java Format {release_name}.",
                    is_warning=True
                )
                release = self.get_release_data_by_name(release_name)
                if release is None:
                    raise ReleaseNotFound(
                        f"Cannot find release id of Google Java Format {release_name}",
                        release_name=release_name,
                    )
                return release
        return ReleaseData.from_json(self.transport.get_latest_release())


def create_releases(execute: Callable[..., CommandResult], github_token: Optional[str] = None,
                    session: Optional[requests.Session] = None, user_agent: Optional[str] = None) -> Releases:
    """Builds Releases over the REST client when a token is available, over curl otherwise."""
    if github_token:
        debug_log("Using authenticated GitHub REST client to fetch releases")
        kwargs = {"user_agent": user_agent} if user_agent else {}
        return Releases(RestReleaseTransport(github_token, session=session, **kwargs))
    debug_log("No GitHub token provided, fetching releases with curl")
    return Releases(CurlReleaseTransport(execute))
