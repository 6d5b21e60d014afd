"""arklab: searchable catalog of AI agents."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("arklab-catalog")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
