from typing import Protocol

import requests

from .config import LICENSES_ENDPOINT, Settings
from .errors import ProviderError


class IndexProvider(Protocol):

    def FetchIndex(self) -> bytes: ...

    def FetchDetail(self, key: str, url: str | None = None) -> bytes: ...


class GithubLicenseProvider:
    """
    Reads the license index and per-license detail from the GitHub licenses API.
    Parameters
    ----------
    settings : Settings
        API base URL, optional token and request timeout.
    """

    def __init__(self, settings: Settings):

        self.settings = settings

    def FetchIndex(self) -> bytes:

        return self.GetGithubApi(LICENSES_ENDPOINT)

    def FetchDetail(self, key: str, url: str | None = None) -> bytes:

        endpoint = f"{LICENSES_ENDPOINT}/{key}"

        # Index URLs are followed only when they point back at the configured API
        if url and url.startswith(f"{self.settings.apiUrl}/"):
            endpoint = url[len(self.settings.apiUrl) :]

        return self.GetGithubApi(endpoint)

    def GetGithubApi(self, endpoint: str) -> bytes:
        """
        Makes a GET request to the GitHub API.
        Parameters
        ----------
        endpoint : str
            The API endpoint to request (e.g., "/licenses/mit").
        Returns
        -------
        bytes
            The raw response body.
        Raises
        ------
        ProviderError
            On timeouts, connection errors and non-success statuses.
        """

        headers = {"Accept": "application/vnd.github+json"}

        if self.settings.token:
            headers["Authorization"] = f"token {self.settings.token}"
        url = f"{self.settings.apiUrl}{endpoint}"

        try:
            r = requests.get(url, headers=headers, timeout=self.settings.timeout)
            r.raise_for_status()

            return r.content

        except requests.exceptions.Timeout as e:
            raise ProviderError(f"Timeout API ({url})") from e

        except requests.exceptions.RequestException as e:
            message = f"API ({url}): {e}"

            if e.response is not None and e.response.status_code == 403:
                remaining = e.response.headers.get("X-RateLimit-Remaining", "N/A")
                message += f" (rate limit remaining: {remaining}; set GITHUB_TOKEN)"

            raise ProviderError(message) from e
