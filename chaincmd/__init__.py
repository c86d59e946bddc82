"""chaincmd: command chaining for console applications.

A master command that finishes successfully triggers its registered member
commands in order, while member commands refuse to run on their own. The CLI
in :mod:`chaincmd.app` is a thin layer over :class:`chaincmd.application.Application`.
"""

from chaincmd._version import __version__

__all__ = ["__version__"]
