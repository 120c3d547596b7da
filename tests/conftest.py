import os

import pytest

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("ENHANCER_SEED", "1234")

from app.data.sample_questions import SAMPLE_QUESTIONS


def first_template(pool):
    """Chooser für Tests: nimmt immer das erste Template."""
    return pool[0]


@pytest.fixture
def first_chooser():
    return first_template


@pytest.fixture
def sample_questions():
    return list(SAMPLE_QUESTIONS)
