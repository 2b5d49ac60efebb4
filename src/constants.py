"""Constants used in business logic."""

from typing import Final

# GitHub REST API endpoint used when no URL is configured
DEFAULT_GITHUB_API_URL: Final[str] = "https://api.github.com"

# API version pinned through the X-GitHub-Api-Version header
GITHUB_API_VERSION: Final[str] = "2022-11-28"

# media type recommended by GitHub for REST API calls
GITHUB_MEDIA_TYPE: Final[str] = "application/vnd.github+json"

DEFAULT_USER_AGENT: Final[str] = "repo-scenarios"

# timeout for one HTTP round trip, in seconds
DEFAULT_HTTP_TIMEOUT: Final[int] = 30

# the list repositories step is satisfied by this status code only
EXPECTED_STATUS_CODE: Final[int] = 200

# keys looked up in scenario parameters
GITHUB_TOKEN_PARAMETER: Final[str] = "github_token"
GITHUB_API_URL_PARAMETER: Final[str] = "github_api_url"
GITHUB_TIMEOUT_PARAMETER: Final[str] = "github_timeout"

DEFAULT_CONFIGURATION_FILE: Final[str] = "repo-scenarios.yaml"
CONFIGURATION_DUMP_FILE: Final[str] = "configuration.json"

# step phrases understood by the scenario context
STEP_AUTHENTICATE: Final[str] = "I am an authenticated user"
STEP_LIST_REPOSITORIES: Final[str] = "I request a list of my repositories"
STEP_REPOSITORY_PRESENT: Final[str] = (
    "the results should include a repository named {name}"
)
