"""Pytest fixtures for interview-ai tests."""

import os
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("MISTRAL_API_KEY", "test-key")

from interview_ai.core.engine import InterviewAIEngine  # noqa: E402
from interview_ai.utils.logger import InterviewAILogger  # noqa: E402


def make_completion(content, prompt_tokens=120, completion_tokens=80):
    """Build an object shaped like a chat completion response."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(prompt_tokens=prompt_tokens, completion_tokens=completion_tokens),
    )


@pytest.fixture
def mock_client():
    """Mistral client double; set chat.complete.return_value per test."""
    return MagicMock()


@pytest.fixture
def engine(mock_client):
    return InterviewAIEngine(client=mock_client, call_logger=InterviewAILogger())


@pytest.fixture
def sample_resume():
    return (
        "Jane Doe\n"
        "Senior Backend Engineer, 7 years of Python, FastAPI and PostgreSQL.\n"
        "Led the migration of a monolith to event-driven services."
    )


@pytest.fixture
def sample_job_requirements():
    return "Staff Python Engineer. Distributed systems, async IO, mentoring."
