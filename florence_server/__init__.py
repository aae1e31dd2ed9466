"""Records, stacks, launch control and write-turn control for a praise-event server."""

__version__ = "0.1.0"