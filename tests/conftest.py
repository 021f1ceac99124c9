"""Pytest configuration and shared field fixtures."""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so absolute imports work
# (tests/ is inside the root, so parent is the root)
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

from primitives.field import GOLDILOCKS, prime_field  # noqa: E402

# Small fields with p - 1 = 2^s * t, t odd and t > 3, so that the generator
# coset avoids every zero of the extended vanishing polynomial.
F11 = prime_field("f11", 11)     # s = 1, extended m = 4
F41 = prime_field("f41", 41)     # s = 3, extended m = 16
F353 = prime_field("f353", 353)  # s = 5, extended m = 64

# t = 3: g^(3 * small_m) = 1, so Z vanishes on half of the generator coset
F13 = prime_field("f13", 13)     # s = 2, extended m = 8


@pytest.fixture
def f11():
    return F11


@pytest.fixture
def f13():
    return F13


@pytest.fixture
def f41():
    return F41


@pytest.fixture
def f353():
    return F353


@pytest.fixture
def goldilocks():
    return GOLDILOCKS


@pytest.fixture(params=[F11, F41, F353], ids=lambda f: f.name)
def field(request):
    """Each small test field in turn."""
    return request.param
