"""Top-level package for the Sprite Sheet Toolkit.

Provides subpackages:
- spritesheet_toolkit.core – immutable models and error types
- spritesheet_toolkit.layout – grid layout solver
- spritesheet_toolkit.sheet – compose / decompose / extract
- spritesheet_toolkit.io – codec, named colours, output naming and writing
"""

from importlib.metadata import PackageNotFoundError, version as pkg_version


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        return pkg_version("spritesheet-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
