"""Hypothesis property tests for KV sorting."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from servkit.kv import KV, sort

pytestmark = [pytest.mark.property]

values = st.one_of(
    st.text(max_size=5), st.integers(), st.floats(allow_nan=False)
)
pairs = st.lists(st.builds(KV, st.text(max_size=8), values), max_size=50)


@given(items=pairs)
def test_sort_is_ordered_permutation(items: list[KV]):
    """Sorting permutes the pairs into ascending UTF-8 byte order of keys."""
    before = list(items)
    sort(items)
    assert sorted(before, key=id) == sorted(items, key=id)
    encoded = [p.key.encode("utf-8", "surrogatepass") for p in items]
    assert encoded == sorted(encoded)
