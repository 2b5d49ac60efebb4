"""Model with scenario runner configuration."""

from pathlib import Path
from typing import Any, Optional

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    SecretStr,
    field_validator,
)

import constants


class ConfigurationBase(BaseModel):
    """Base class for all configuration models that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class GitHubConfiguration(ConfigurationBase):
    """GitHub API configuration.

    Scenarios talk to the GitHub REST API on behalf of the owner of the
    configured token. The token is usually injected from the environment
    with the ``${env.GITHUB_TOKEN}`` syntax so it never lands in the
    configuration file itself.

    Useful resources:

      - [GitHub REST API](https://docs.github.com/en/rest)
      - [Personal access tokens](https://docs.github.com/en/authentication/keeping-your-account-and-data-secure/managing-your-personal-access-tokens)
    """

    url: AnyHttpUrl = Field(
        AnyHttpUrl(constants.DEFAULT_GITHUB_API_URL),
        title="GitHub API URL",
        description="Base URL of the GitHub REST API. Change it for GitHub "
        "Enterprise Server installations.",
    )

    token: Optional[SecretStr] = Field(
        None,
        title="Access token",
        description="Personal access token used by the authentication step",
    )

    timeout: PositiveInt = Field(
        constants.DEFAULT_HTTP_TIMEOUT,
        title="Timeout",
        description="Timeout in seconds for a single HTTP request",
    )

    @field_validator("token", mode="before")
    @classmethod
    def empty_token_is_none(cls, value: Any) -> Any:
        """Treat an empty token (unset environment variable) as missing."""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value


class Configuration(ConfigurationBase):
    """Global configuration."""

    name: str = Field(
        ...,
        title="Suite name",
        description="Name of the scenario suite, used in log messages.",
    )

    github: GitHubConfiguration = Field(
        default_factory=GitHubConfiguration,
        title="GitHub configuration",
        description="This section contains GitHub API connection settings.",
    )

    parameters: dict[str, str] = Field(
        default_factory=dict,
        title="Scenario parameters",
        description="Additional parameters handed to every scenario context.",
    )

    def scenario_parameters(self) -> dict[str, str]:
        """Return the plain parameter mapping handed to scenario contexts.

        The mapping contains everything from ``parameters`` plus the GitHub
        API URL, the request timeout and, when configured, the access token.

        Returns:
            dict[str, str]: Parameters for one scenario context.
        """
        params = dict(self.parameters)
        params[constants.GITHUB_API_URL_PARAMETER] = str(self.github.url).rstrip("/")
        params[constants.GITHUB_TIMEOUT_PARAMETER] = str(self.github.timeout)
        if self.github.token is not None:
            params[constants.GITHUB_TOKEN_PARAMETER] = (
                self.github.token.get_secret_value()
            )
        return params

    def dump(self, filename: str | Path = constants.CONFIGURATION_DUMP_FILE) -> None:
        """
        Write the current Configuration model to a JSON file.

        Secrets are masked by pydantic when the model is serialized.

        Parameters:
            filename (str | Path): Path to the output file.
        """
        with open(filename, "w", encoding="utf-8") as fout:
            fout.write(self.model_dump_json(indent=4))
