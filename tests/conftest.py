import random

import pytest
from dotenv import load_dotenv


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    load_dotenv(".env.test", override=True)
    yield

    load_dotenv(".env", override=True)


class FirstChoiceRandom(random.Random):
    """Always picks the first candidate, so generated values are predictable."""

    def randrange(self, start, stop=None, step=1):
        return 0 if stop is None else start

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def first_choice_rng():
    return FirstChoiceRandom()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)
