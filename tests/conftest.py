import random

import pytest

import colony
import creature
from gene import Gene
from config import GENE_LENGTH


@pytest.fixture(autouse=True)
def seeded():
    random.seed(1234)
    yield


@pytest.fixture
def still(monkeypatch):
    """No random jitter: foragers and colonies push with a zero force."""
    def zero(high, low=0.0):
        return 0.0
    monkeypatch.setattr(creature, "random_between", zero)
    monkeypatch.setattr(colony, "random_between", zero)
    return zero


@pytest.fixture
def hunter_gene():
    return Gene([0] * GENE_LENGTH)


@pytest.fixture
def prey_gene():
    return Gene([1] * GENE_LENGTH)
