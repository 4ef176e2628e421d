"""Hypothesis property tests for jump consistent hashing.

- **Range**: the bucket is always in ``[0, buckets)``.
- **Monotonic growth**: adding buckets never moves a key to a lower bucket,
  and a key that moves always moves to the newest bucket.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from servkit.hashing import jump_hash

pytestmark = [pytest.mark.property]

keys = st.integers(min_value=0, max_value=2**64 - 1)


@given(key=keys, buckets=st.integers(min_value=1, max_value=100_000))
def test_in_range(key: int, buckets: int):
    """0 <= jump_hash(k, n) < n."""
    assert 0 <= jump_hash(key, buckets) < buckets


@given(key=keys, limit=st.integers(min_value=2, max_value=300))
def test_growth_only_moves_to_new_bucket(key: int, limit: int):
    """Going from n to n+1 buckets either keeps the key or moves it to n."""
    previous = jump_hash(key, 1)
    for n in range(2, limit + 1):
        current = jump_hash(key, n)
        assert current in (previous, n - 1)
        assert current >= previous
        previous = current
