"""Frontend interfaces for the board engines.

The Tkinter frontend lives in ``lifeboard.frontends.tkinter_gui`` and is
imported on demand so the CLI works without Tk installed.
"""

from .cli import CLIGameOfLife

__all__ = ["CLIGameOfLife"]
