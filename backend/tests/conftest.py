"""Shared test configuration and pytest markers."""

import pytest

SCENARIO_RESUME = (
    "Experienced JavaScript and React developer. 5 years experience in javascript. "
    "Experience in javascript experience in javascript."
)
SCENARIO_SKILLS = ["javascript", "react", "docker"]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: needs downloaded NLTK tagger data (slow)"
    )


@pytest.fixture
def scenario_resume() -> str:
    return SCENARIO_RESUME


@pytest.fixture
def scenario_skills() -> list[str]:
    return list(SCENARIO_SKILLS)
