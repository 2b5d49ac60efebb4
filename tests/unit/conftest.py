"""Shared pytest fixtures for unit tests."""

from typing import Callable

import pytest
from pytest_mock import MockerFixture, MockType

from scenario.context import ScenarioContext

type ClientFactory = Callable[..., MockType]


@pytest.fixture(name="make_client")
def make_client_fixture(mocker: MockerFixture) -> ClientFactory:
    """Return factory creating mocked GitHub API clients.

    The returned client answers `api("current_user").repositories()` with
    the given repositories and reports the given status code as the status
    of the last response.
    """

    def make_client(
        repositories: list[dict] | None = None, status_code: int = 200
    ) -> MockType:
        client = mocker.Mock()
        client.api.return_value.repositories.return_value = (
            repositories if repositories is not None else []
        )
        client.get_last_response.return_value.status_code = status_code
        return client

    return make_client


@pytest.fixture(name="parameters")
def parameters_fixture() -> dict[str, str]:
    """Scenario parameters with an access token."""
    return {"github_token": "ghp_secret"}


@pytest.fixture(name="context")
def context_fixture(
    make_client: ClientFactory, parameters: dict[str, str]
) -> ScenarioContext:
    """Scenario context using a client that returns two repositories."""
    client = make_client([{"name": "alpha"}, {"name": "beta"}])
    return ScenarioContext(parameters, client)
