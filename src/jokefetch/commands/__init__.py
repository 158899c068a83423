"""Built-in sub-commands: ``fetch`` and the ``config`` group."""
