"""Version management for the logistics model package.

Provides version information using importlib.metadata with fallback to
pyproject.toml for source checkouts.
"""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION_NAME = "logistics-canonical-model"


def get_version() -> str:
    """Get the package version.

    Tries installed package metadata first, then falls back to reading
    pyproject.toml at the repository root.

    Returns:
        Version string (e.g., "0.1.0")
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        pyproject_path = Path(__file__).parents[3] / "pyproject.toml"

        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)

        return pyproject_data["project"]["version"]


__version__ = get_version()
