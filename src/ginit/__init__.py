"""ginit - create a GitHub repository and wire up the current directory."""

from importlib.metadata import version

__version__ = version("ginit")
