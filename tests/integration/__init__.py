"""Integration tests.

Purpose
- Exercise the parts that talk to the operating system: the sd_notify
  datagram socket, the /proc argv region and real files.

Guidelines
- Skip cleanly on platforms that lack the facility instead of faking it.
- Run anything that rewrites process memory in a child process.
"""
