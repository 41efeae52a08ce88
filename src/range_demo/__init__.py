"""Demo program printing examples of lazy sequence views."""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover - best effort during editable installs
    __version__ = version("lazy-transpose")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
