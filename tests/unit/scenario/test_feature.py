"""Unit tests for loading feature files."""

import pytest

from scenario.feature import ParserError, load_feature, parse_feature, step_text

FEATURE = """
# repositories of the current user
@github
Feature: Repositories

  As a GitHub user I want my repositories listed

  Scenario: Repository is listed
    Given I am an authenticated user
    When I request a list of my repositories
    Then the results should include a repository named "alpha"
    And the results should include a repository named "beta"

  Scenario: Listing only
    Given I am an authenticated user
    But I request a list of my repositories
"""


def test_parse_feature() -> None:
    """Test parsing feature with two scenarios."""
    feature = parse_feature(FEATURE)

    assert feature is not None
    assert feature.name == "Repositories"
    assert feature.description == ["As a GitHub user I want my repositories listed"]
    assert "github" in feature.tags
    assert [s.name for s in feature.scenarios] == [
        "Repository is listed",
        "Listing only",
    ]
    steps = feature.scenarios[0].steps
    assert [s.step_type for s in steps] == ["given", "when", "then", "then"]
    assert steps[3].name == 'the results should include a repository named "beta"'
    assert step_text(steps[1]) == "When I request a list of my repositories"
    assert step_text(steps[3]).startswith("And the results")


def test_parse_feature_conjunction_takes_previous_keyword() -> None:
    """Test that But continues the preceding step type."""
    feature = parse_feature(FEATURE)

    assert feature is not None
    assert [s.step_type for s in feature.scenarios[1].steps] == ["given", "given"]


def test_parse_feature_background_and_star_steps() -> None:
    """Test that background steps precede scenario steps."""
    feature = parse_feature(
        """Feature: Repositories
  Background:
    Given I am an authenticated user

  Scenario: Listing
    * I request a list of my repositories
"""
    )

    assert feature is not None
    scenario = feature.scenarios[0]
    assert [step_text(s) for s in scenario.all_steps] == [
        "Given I am an authenticated user",
        "* I request a list of my repositories",
    ]
    assert [s.step_type for s in scenario.all_steps] == ["given", "given"]


def test_parse_feature_scenario_outline() -> None:
    """Test that scenario outlines expand to one scenario per example row."""
    feature = parse_feature(
        """Feature: Repositories
  Scenario Outline: Repository <name> is listed
    Given I am an authenticated user
    When I request a list of my repositories
    Then the results should include a repository named "<name>"

    Examples:
      | name  |
      | alpha |
      | beta  |
"""
    )

    assert feature is not None
    scenarios = list(feature.walk_scenarios())
    assert len(scenarios) == 2
    assert scenarios[1].steps[2].name == (
        'the results should include a repository named "beta"'
    )


def test_parse_feature_empty_text() -> None:
    """Test that text without a feature yields nothing."""
    assert parse_feature("# nothing here\n") is None


def test_parse_feature_invalid() -> None:
    """Test that steps outside of a scenario are rejected."""
    with pytest.raises(ParserError):
        parse_feature("Given I am an authenticated user\n")


def test_load_feature(tmp_path) -> None:
    """Test reading feature from file."""
    path = tmp_path / "repositories.feature"
    path.write_text(FEATURE, encoding="utf-8")

    feature = load_feature(path)

    assert feature is not None
    assert len(feature.scenarios) == 2
