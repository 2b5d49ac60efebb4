"""GitHub REST API client used by scenario steps.

Only the small part of the API the scenarios need is implemented: token
authentication, the current user's repository listing, and access to the
last HTTP response so steps can assert on its status code.
"""

import logging
from enum import Enum
from typing import Any, Optional, Protocol

import requests

import constants
from utils.types import RepositoryList

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Unknown API name or unsupported argument passed to the client."""


class AuthMethod(str, Enum):
    """Ways the client can present credentials to GitHub."""

    ACCESS_TOKEN = "access_token_header"
    CLIENT_ID = "client_id_header"
    JWT = "jwt"


class CurrentUserApi(Protocol):
    """Part of the API scoped to the authenticated user."""

    def repositories(self) -> RepositoryList:
        """Return repositories owned by the authenticated user."""


class LastResponse(Protocol):
    """Response attributes the scenario steps rely on."""

    status_code: int


class GitHubApi(Protocol):
    """Client capability consumed by the scenario context."""

    def authenticate(
        self,
        token: str,
        username: Optional[str] = None,
        method: AuthMethod = AuthMethod.ACCESS_TOKEN,
    ) -> None:
        """Remember credentials for subsequent requests."""

    def api(self, name: str) -> CurrentUserApi:
        """Return the named API."""

    def get_last_response(self) -> LastResponse:
        """Return the last HTTP response received."""


class CurrentUser:
    """API for resources of the authenticated user (``/user``)."""

    def __init__(self, client: "GitHubClient") -> None:
        """Bind the API to a client."""
        self._client = client

    def repositories(
        self,
        type: str = "owner",  # pylint: disable=redefined-builtin
        sort: str = "full_name",
        direction: str = "asc",
    ) -> list[dict[str, Any]]:
        """
        List repositories of the authenticated user.

        Only the first page returned by GitHub is read.

        Parameters:
            type (str): Repository affiliation filter, `owner` by default.
            sort (str): Sort key understood by the GitHub API.
            direction (str): `asc` or `desc`.

        Returns:
            list[dict[str, Any]]: Decoded repository objects, or an empty
            list when the response body is not a JSON array (for example an
            error document).
        """
        response = self._client.get(
            "/user/repos",
            params={"type": type, "sort": sort, "direction": direction},
        )
        try:
            body = response.json()
        except ValueError:
            logger.warning("Response from /user/repos is not valid JSON")
            return []
        if not isinstance(body, list):
            return []
        return body


class GitHubClient:
    """Minimal synchronous GitHub REST API client."""

    _apis = {"current_user": CurrentUser, "me": CurrentUser}

    def __init__(
        self,
        base_url: str = constants.DEFAULT_GITHUB_API_URL,
        timeout: int = constants.DEFAULT_HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the client.

        Parameters:
            base_url (str): GitHub API root, without trailing slash.
            timeout (int): Timeout in seconds for each request.
            session (Optional[requests.Session]): Session to use; a new one
            is created when omitted.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()
        self._session.headers.update(
            {
                "Accept": constants.GITHUB_MEDIA_TYPE,
                "X-GitHub-Api-Version": constants.GITHUB_API_VERSION,
                "User-Agent": constants.DEFAULT_USER_AGENT,
            }
        )
        self._last_response: Optional[requests.Response] = None

    def authenticate(
        self,
        token: str,
        username: Optional[str] = None,
        method: AuthMethod = AuthMethod.ACCESS_TOKEN,
    ) -> None:
        """
        Remember credentials to be sent with every following request.

        Parameters:
            token (str): Access token, JWT, or client secret.
            username (Optional[str]): Client ID; required for `CLIENT_ID`.
            method (AuthMethod): How the credentials are presented.

        Raises:
            InvalidArgumentError: If `CLIENT_ID` is used without a username.
        """
        self._session.auth = None
        self._session.headers.pop("Authorization", None)
        match method:
            case AuthMethod.ACCESS_TOKEN:
                self._session.headers["Authorization"] = f"token {token}"
            case AuthMethod.JWT:
                self._session.headers["Authorization"] = f"Bearer {token}"
            case AuthMethod.CLIENT_ID:
                if username is None:
                    raise InvalidArgumentError(
                        "client ID authentication requires a username"
                    )
                self._session.auth = (username, token)
        logger.debug("Client authenticated using %s", method.name)

    def api(self, name: str) -> CurrentUser:
        """
        Return API object for the given name.

        Raises:
            InvalidArgumentError: If no API with such name exists.
        """
        try:
            api_class = self._apis[name]
        except KeyError as e:
            raise InvalidArgumentError(f'Invalid endpoint: "{name}"') from e
        return api_class(self)

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> requests.Response:
        """
        Perform GET request and remember the response.

        Transport errors raised by requests are propagated unchanged.
        """
        url = self.base_url + path
        logger.debug("GET %s", url)
        response = self._session.get(url, params=params, timeout=self.timeout)
        self._last_response = response
        logger.debug("GET %s returned %d", url, response.status_code)
        return response

    def get_last_response(self) -> requests.Response:
        """
        Return the last HTTP response received by the client.

        Raises:
            RuntimeError: If no request has been made yet.
        """
        if self._last_response is None:
            raise RuntimeError("No request has been made by the client yet")
        return self._last_response

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._session.close()
