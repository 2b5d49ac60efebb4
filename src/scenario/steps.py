"""Registration table binding step phrases to scenario context operations.

Each entry maps a phrase template written in the `parse` module syntax (the
same syntax behave uses) to the name of a `ScenarioContext` method. Captured
values are passed to the method as keyword arguments.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

import parse

import constants
from models.results import StepResult
from scenario.context import ScenarioContext

STEP_KEYWORDS = ("given", "when", "then")


class UndefinedStepError(LookupError):
    """No registered step matches the step text."""


def strip_quotes(text: str) -> str:
    """Remove double quotes surrounding a captured value."""
    if len(text) >= 2 and text[0] == text[-1] == '"':
        return text[1:-1]
    return text


@dataclass(frozen=True)
class StepDefinition:
    """One entry of the step registry."""

    keyword: str
    template: str
    handler_name: str
    _parser: parse.Parser = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile the template."""
        object.__setattr__(self, "_parser", parse.compile(self.template))

    def match(self, text: str) -> Optional[dict[str, Any]]:
        """Return captured arguments when the whole text matches the template."""
        result = self._parser.parse(text)
        if result is None:
            return None
        return {key: strip_quotes(value) for key, value in result.named.items()}

    def handler(self, context: ScenarioContext) -> Callable[..., StepResult]:
        """Return the bound context method handling this step."""
        return getattr(context, self.handler_name)


class StepRegistry:
    """Explicit table of step definitions."""

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._definitions: list[StepDefinition] = []

    def register(self, keyword: str, template: str, handler_name: str) -> StepDefinition:
        """
        Add a step definition.

        Raises:
            ValueError: If the keyword is unknown or the same keyword and
            template pair is already registered.
        """
        keyword = keyword.lower()
        if keyword not in STEP_KEYWORDS:
            raise ValueError(f"Unknown step keyword: {keyword}")
        for definition in self._definitions:
            if definition.keyword == keyword and definition.template == template:
                raise ValueError(f"Step already registered: {keyword} {template}")
        definition = StepDefinition(keyword, template, handler_name)
        self._definitions.append(definition)
        return definition

    def __iter__(self) -> Iterator[StepDefinition]:
        """Iterate over registered definitions in registration order."""
        return iter(self._definitions)

    def __len__(self) -> int:
        """Return number of registered definitions."""
        return len(self._definitions)

    def match(self, keyword: str, text: str) -> tuple[StepDefinition, dict[str, Any]]:
        """
        Find the definition matching the step text.

        Parameters:
            keyword (str): Resolved step keyword (given, when, then).
            text (str): Step text without the keyword.

        Returns:
            tuple: The matching definition and its captured arguments.

        Raises:
            UndefinedStepError: If no definition matches.
        """
        keyword = keyword.lower()
        for definition in self._definitions:
            if definition.keyword != keyword:
                continue
            arguments = definition.match(text)
            if arguments is not None:
                return definition, arguments
        raise UndefinedStepError(f"Undefined step: {text}")

    def run(self, context: ScenarioContext, keyword: str, text: str) -> StepResult:
        """Match the step and invoke its handler on the context."""
        definition, arguments = self.match(keyword, text)
        return definition.handler(context)(**arguments)


def create_default_registry() -> StepRegistry:
    """Return registry with the repository listing steps."""
    registry = StepRegistry()
    registry.register("given", constants.STEP_AUTHENTICATE, "authenticate")
    registry.register("when", constants.STEP_LIST_REPOSITORIES, "request_repositories")
    registry.register(
        "then", constants.STEP_REPOSITORY_PRESENT, "assert_repository_present"
    )
    return registry


registry: StepRegistry = create_default_registry()
