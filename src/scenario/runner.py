"""Minimal harness running scenarios against fresh scenario contexts."""

import logging
from typing import Callable, Mapping, Optional

from client import GitHubApi, GitHubClient
from models.results import ScenarioOutcome
from scenario.context import ScenarioContext
from scenario.feature import Feature, Scenario, step_text
from scenario.steps import StepRegistry, UndefinedStepError, registry

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], GitHubApi]


class ScenarioRunner:
    """Run scenarios step by step and collect their outcomes.

    Every scenario gets its own `ScenarioContext` and its own client from
    `client_factory`, nothing is shared between scenarios.
    """

    def __init__(
        self,
        parameters: Mapping[str, str],
        client_factory: Optional[ClientFactory] = None,
        step_registry: StepRegistry = registry,
    ) -> None:
        """
        Initialize the runner.

        Parameters:
            parameters (Mapping[str, str]): Parameters for every context.
            client_factory (Optional[ClientFactory]): Creates API clients;
            the context builds a `GitHubClient` itself when omitted.
            step_registry (StepRegistry): Step definitions to match against.
        """
        self.parameters = parameters
        self.client_factory = client_factory
        self.registry = step_registry

    def _new_context(self) -> ScenarioContext:
        client = self.client_factory() if self.client_factory is not None else None
        return ScenarioContext(self.parameters, client)

    def run(self, scenario: Scenario) -> ScenarioOutcome:
        """
        Run background and scenario steps, stopping at the first failure.

        Failed step results and any exception raised while running a step
        mark the scenario as failed. Exceptions are kept on the outcome
        as they were raised.
        """
        outcome = ScenarioOutcome(name=scenario.name)
        context = self._new_context()
        try:
            for step in scenario.all_steps:
                text = step_text(step)
                outcome.steps.append(text)
                logger.debug("Step: %s", text)
                try:
                    result = self.registry.run(context, step.step_type, step.name)
                except UndefinedStepError as e:
                    outcome.failed_step = text
                    outcome.message = str(e)
                    break
                except Exception as e:  # pylint: disable=broad-exception-caught
                    outcome.failed_step = text
                    outcome.message = str(e)
                    outcome.error = e
                    break
                if not result.passed:
                    outcome.failed_step = text
                    outcome.message = result.message
                    break
        finally:
            if isinstance(context.client, GitHubClient):
                context.client.close()

        if outcome.passed:
            logger.info("Scenario passed: %s", scenario.name)
        else:
            logger.error(
                "Scenario failed: %s\n  %s\n  %s",
                scenario.name,
                outcome.failed_step,
                outcome.message,
            )
        return outcome

    def run_feature(self, feature: Feature) -> list[ScenarioOutcome]:
        """Run every scenario of the feature, expanding scenario outlines."""
        logger.info("Feature: %s", feature.name)
        return [self.run(scenario) for scenario in feature.walk_scenarios()]
