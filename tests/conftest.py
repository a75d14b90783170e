import numpy as np
import pytest
from rowspace.names import DOUBLE, RATIONAL
from rowspace import DenseMatrix, SparseMatrix


@pytest.fixture(params=[DOUBLE, RATIONAL], scope="session")
def domain(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for parametrized number domains."""
    return request.param


@pytest.fixture(params=["dense", "sparse"], scope="session")
def matrix_factory(request: pytest.FixtureRequest):
    """Provide session-level fixture building a bounded matrix of either backing from row data."""

    def build(rows, domain=DOUBLE):
        if request.param == "dense":
            return DenseMatrix(rows, domain=domain)
        matrix = SparseMatrix(0, len(rows), len(rows[0]), domain=domain)
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                if value != 0:
                    matrix.set_value(value, i, j)
        return matrix

    return build


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20221)
