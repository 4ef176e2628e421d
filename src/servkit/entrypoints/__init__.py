"""Entrypoints (inbound adapters) for SERVKIT.

Expose the toolkit to the outside world. Currently that is the ``servkit``
command-line interface, which parses arguments, calls the library modules and
presents their results.
"""
