"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

The fetch flow itself always exits with status 0: transport and
decode failures are reported as console text, not as a process status. The
remaining codes cover problems outside that flow, such as a broken config
file or invalid command-line usage.

Example::

    $ jokefetch config set request.timeout soon
    $ echo $?
    2   # EXIT_INVALID_USAGE -- the value could not be coerced
"""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred, or the configuration could not be loaded."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or config values."""

EXIT_INTERRUPTED = 130
"""The user pressed Ctrl-C."""
