import random

import pytest

from edes.cipher_core import make_context


ZERO_KEY = bytes(32)
COUNTING_KEY = bytes(range(32))


@pytest.fixture
def zero_context():
    return make_context(ZERO_KEY)


@pytest.fixture
def counting_context():
    return make_context(COUNTING_KEY)


@pytest.fixture
def rng():
    return random.Random(1337)
