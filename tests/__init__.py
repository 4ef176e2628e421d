"""SERVKIT test suite.

Folder taxonomy
- unit/         : One module at a time; the only real I/O allowed is under tmp_path.
- integration/  : Real OS facilities (Unix sockets, /proc, subprocesses).
- functional/   : The ``servkit`` CLI driven end-to-end through Click's runner.
- contract/     : Shared behavior every implementation of an interface must keep.

General guidance
- The autouse ``clean_env`` fixture hides the host's LS_COLORS, NO_COLOR and
  NOTIFY_SOCKET from every test.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, integration, functional, contract, property, slow
"""
