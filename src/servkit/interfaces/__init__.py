"""Interfaces (collaborator boundary) for SERVKIT.

Defines small, framework-free contracts (ABCs) for the pieces of the toolkit
that talk to something outside the process or that callers may want to swap:
the process argument-vector region and configuration property readers.

Dependency rule: this package is independent. Do not import from other
`servkit.*` modules.
"""
