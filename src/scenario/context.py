"""Per-scenario state and the step operations working on it."""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

import constants
from client import AuthMethod, GitHubApi, GitHubClient
from models.results import StepResult
from utils.types import RepositoryList

logger = logging.getLogger(__name__)


class ScenarioContext:
    """State shared by the steps of one scenario.

    A fresh instance must be created for every scenario. The API client is
    injected so tests can pass a double; when omitted a `GitHubClient`
    using the configured API URL and timeout is created.
    """

    def __init__(
        self,
        parameters: Optional[Mapping[str, str]] = None,
        client: Optional[GitHubApi] = None,
    ) -> None:
        """
        Initialize the context.

        Parameters:
            parameters (Optional[Mapping[str, str]]): Configuration values
            such as `github_token`; copied and kept read-only.
            client (Optional[GitHubApi]): API client capability.
        """
        self.parameters: Mapping[str, str] = MappingProxyType(dict(parameters or {}))
        if client is None:
            client = GitHubClient(
                self.parameters.get(
                    constants.GITHUB_API_URL_PARAMETER,
                    constants.DEFAULT_GITHUB_API_URL,
                ),
                int(
                    self.parameters.get(
                        constants.GITHUB_TIMEOUT_PARAMETER,
                        str(constants.DEFAULT_HTTP_TIMEOUT),
                    )
                ),
            )
        self.client: GitHubApi = client
        self.last_results: Optional[RepositoryList] = None

    def authenticate(self) -> StepResult:
        """Authenticate the client with the configured access token.

        A missing `github_token` parameter raises KeyError; errors raised by
        the client are not caught.
        """
        token = self.parameters[constants.GITHUB_TOKEN_PARAMETER]
        self.client.authenticate(token, None, AuthMethod.ACCESS_TOKEN)
        return StepResult.success()

    def request_repositories(self) -> StepResult:
        """Fetch repositories of the authenticated user.

        The fetched list replaces previous results before the status code is
        checked, so it is kept even when the check fails.
        """
        repositories = self.client.api("current_user").repositories()
        self.last_results = repositories
        logger.debug("Fetched %d repositories", len(repositories))
        return self._check_response_code(constants.EXPECTED_STATUS_CODE)

    def assert_repository_present(self, name: str) -> StepResult:
        """Check that the last results contain a repository called `name`."""
        if not self._repository_exists(self.last_results or [], name):
            return StepResult.failure(
                f"Expected to find a repository called '{name}' but it doesn't exist."
            )
        return StepResult.success()

    def _check_response_code(self, expected: int) -> StepResult:
        status_code = self.client.get_last_response().status_code
        if expected != status_code:
            return StepResult.failure(
                f"Expected a {expected} status code but got {status_code} instead!"
            )
        return StepResult.success()

    @staticmethod
    def _repository_exists(repositories: RepositoryList, name: str) -> bool:
        # duplicate names collapse into one key, only presence matters
        by_name = {repo.get("name"): repo for repo in repositories}
        return name in by_name
