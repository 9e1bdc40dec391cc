"""Top-level package for the Passport Photo Sheet builder.

Provides subpackages:
- photo_sheet.builder – layout engine, image intake and PDF rendering
- photo_sheet.common – shared error taxonomy
- photo_sheet.gui – PySide6 desktop app
"""
from typing import Optional


def _read_pyproject_version(pyproject) -> Optional[str]:
    """Return ``version`` from the [project] table of a pyproject.toml, if set."""
    try:
        content = pyproject.read_text(encoding="utf-8")
    except OSError:
        return None
    
    section = None
    for line in content.splitlines():
        line = line.strip()
        if line.startswith("["):
            section = line.strip("[]").strip()
            continue
        key, sep, value = line.partition("=")
        if section == "project" and sep and key.strip() == "version":
            # Parse: version = "0.3.0"
            return value.split("#")[0].strip().strip('"').strip("'")
    return None


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    import sys
    from pathlib import Path
    
    if not getattr(sys, 'frozen', False):
        pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    else:
        pyproject = Path(getattr(sys, "_MEIPASS", ".")) / "pyproject.toml"
    
    if pyproject.exists():
        found = _read_pyproject_version(pyproject)
        if found:
            return found
    
    from importlib.metadata import version as pkg_version, PackageNotFoundError
    try:
        return pkg_version("photo-sheet")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__ = ["__version__"]
