"""Package version lookup."""

from importlib import metadata

PACKAGE_NAME = "predictstore"


def get_version() -> str:
    """Return the installed package version, or a dev marker when not installed."""
    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return "0.1.0-dev"
