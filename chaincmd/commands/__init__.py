"""Console commands shipped with chaincmd."""

from chaincmd.commands.bar import BarCommand
from chaincmd.commands.chains import ChainListCommand
from chaincmd.commands.foo import FooCommand

__all__ = ["BarCommand", "ChainListCommand", "FooCommand"]
