"""Rule-based static analysis over an explicit list of source files."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("srcscan")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0-dev"

__all__ = ["__version__"]
