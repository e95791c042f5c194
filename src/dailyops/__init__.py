"""dailyops - Stand-up generator and branch cleanup tool."""

__version__ = "0.1.0"


def get_version() -> str:
    """Return the package version."""
    return __version__
