import jax.numpy as jnp
import pytest

from ephemjax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Series evaluation needs double precision; tests that exercise other
    dtypes (test_config.py) restore float64 when they finish.
    """
    set_dtype(jnp.float64)
