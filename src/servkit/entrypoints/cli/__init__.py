"""The ``servkit`` command-line interface."""
