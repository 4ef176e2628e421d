"""Contract tests.

Purpose
- Define behavior once and run it against every implementation of an
  interface (id generators, config readers) to keep them interchangeable.

Guidelines
- Parametrize implementations via fixtures.
- Assert only the public contract, not internals.
"""
