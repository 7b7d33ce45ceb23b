"""GitHub API client for repository tags.

Provides a lightweight REST client for listing the tags of a GitHub
repository and the commits they point to.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

from constants import Constants
from common.errors import ResolutionError
from common.http_client import robust_get

logger = logging.getLogger(__name__)


class GitHubClient:
    """Lightweight REST client for GitHub API operations.

    Authenticates with HTTP Basic when both a username and a password (or
    personal access token) are given, otherwise with a bearer token when one
    is available, otherwise anonymously.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize GitHub client.

        Args:
            base_url: Base URL for GitHub API (defaults to Constants.GITHUB_API_BASE)
            username: Username for Basic auth
            password: Password or personal access token for Basic auth
            token: Bearer token used when no username/password pair is set
            timeout: Request timeout in seconds (defaults to Constants.REQUEST_TIMEOUT)
        """
        self.base_url = (base_url or Constants.GITHUB_API_BASE).rstrip("/")
        self.username = username or None
        self.password = password or None
        self.token = token or None
        self.timeout = timeout

    def _get_auth(self) -> Optional[Tuple[str, str]]:
        if self.username and self.password:
            return (self.username, self.password)
        return None

    def _get_headers(self) -> Dict[str, str]:
        """Get request headers including authorization if a token is available."""
        headers = {"Accept": "application/vnd.github+json"}
        if self.token and self._get_auth() is None:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def get_tags(self, owner: str, repo: str) -> List[Dict[str, Any]]:
        """Fetch the first page of repository tags.

        Only one request is made, so on repositories with more than
        ``Constants.REPO_API_PER_PAGE`` tags the older ones are not returned
        and cannot be used to match aliases. A debug line is logged when the
        API reports further pages.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            List of tag dictionaries as returned by the API

        Raises:
            ResolutionError: On transport failure, non-200 status or a body
                that is not a JSON array.
        """
        url = (
            f"{self.base_url}/repos/{quote(owner, safe='')}/{quote(repo, safe='')}/tags"
            f"?per_page={Constants.REPO_API_PER_PAGE}"
        )
        status, headers, text = robust_get(
            url,
            headers=self._get_headers(),
            auth=self._get_auth(),
            timeout=self.timeout,
        )

        if status == 0:
            raise ResolutionError(f"{owner}/{repo}: {text}")
        if status in (401, 403):
            raise ResolutionError(f"{owner}/{repo}: authentication failed (HTTP {status})")
        if status != 200:
            raise ResolutionError(f"{owner}/{repo}: unexpected HTTP status {status}")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ResolutionError(f"{owner}/{repo}: invalid JSON in tags response: {e}") from e
        if not isinstance(data, list):
            raise ResolutionError(f"{owner}/{repo}: tags response is not a list")
        logger.debug("Fetched %d tags for %s/%s", len(data), owner, repo)
        if _has_next_page(headers):
            logger.debug(
                "%s/%s has more than %d tags; older tags are not considered",
                owner,
                repo,
                Constants.REPO_API_PER_PAGE,
            )
        return data


def _has_next_page(headers: Dict[str, str]) -> bool:
    for key, value in headers.items():
        if key.lower() == "link" and 'rel="next"' in value:
            return True
    return False
