"""safepath command-line interface."""
from safepath import __version__

__all__ = ['__version__']
