import jax.numpy as jnp
import pytest

from framejax.config import set_dtype

# Test modules build EOP datasets and state vectors at import time, before
# any fixture runs.
set_dtype(jnp.float64)


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Frame rotations are compared against references at the 1e-9 level,
    which float32 Julian Dates and angles cannot resolve.  Tests that
    exercise float32 override this with their own autouse fixture.
    """
    set_dtype(jnp.float64)
