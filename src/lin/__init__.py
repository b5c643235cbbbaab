"""lin: command-line client for the Linear GraphQL API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("lin")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

from lin.core import Workspace

__all__ = ["Workspace", "__version__"]
