"""SERVKIT

A standard-library-style toolkit for building service-side command-line and
daemon programs on POSIX systems: identifiers, hashing, terminal colors,
line-oriented data, systemd notifications, process titles, emoji and cron
expressions.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
