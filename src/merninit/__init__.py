"""merninit: boilerplate overlays for MERN starter projects."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("merninit")
except PackageNotFoundError:
    __version__ = "0.0.0"
