"""Adapters for SERVKIT.

Provide concrete implementations of the contracts in `servkit.interfaces`:
argv region access (procfs-backed and in-memory) and configuration property
readers (in-memory and INI/KNF files).

Dependency rule: may import `servkit.interfaces`; nothing in
`servkit.interfaces` imports this package.
"""
