"""Functional tests.

Purpose
- Validate user-visible behavior of the ``servkit`` CLI.

Guidelines
- Treat the CLI as a black box; check exit codes, stdout and stderr.
- Keep the flight recorder log under tmp_path.
- One flow/concern per test.
"""
