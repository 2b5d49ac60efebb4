"""Loading feature files with the behave Gherkin parser.

The command line runner reads the same `.feature` files as behave, so both
harnesses agree on what a scenario contains (backgrounds, outlines, `*`
steps and descriptions included).
"""

from pathlib import Path
from typing import Optional

from behave.model import Feature, Scenario, Step
from behave.parser import ParserError
from behave import parser

__all__ = [
    "Feature",
    "ParserError",
    "Scenario",
    "Step",
    "load_feature",
    "parse_feature",
    "step_text",
]


def parse_feature(text: str, filename: Optional[str] = None) -> Optional[Feature]:
    """
    Parse feature text.

    Returns:
        Optional[Feature]: Parsed feature, or None when the text contains
        no feature (only comments or blank lines).

    Raises:
        ParserError: If the text is not valid Gherkin.
    """
    return parser.parse_feature(text, filename=filename)


def load_feature(path: str | Path) -> Optional[Feature]:
    """Read and parse a feature file.

    Raises:
        ParserError: If the file is not valid Gherkin.
    """
    return parser.parse_file(str(path))


def step_text(step: Step) -> str:
    """Return the step as written in the feature file."""
    return f"{step.keyword} {step.name}"
