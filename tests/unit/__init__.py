"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Use in-memory adapters (MemoryArgvRegion, MemoryConfigReader) instead of
  process memory or real files where an interface allows it.
- Keep tests small, fast, and deterministic.
"""
