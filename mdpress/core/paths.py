#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the mdpress package.

Bundled assets live next to the code:

    mdpress/
    ├── assets/
    │   ├── templates/   # <name>.html documents with {{TITLE}}/{{CSS}}/{{CONTENT}}
    │   └── themes/      # <name>.css stylesheets
    ├── builders/
    ├── core/
    └── pipeline/

Logs default to ``~/.mdpress/logs`` and can be redirected with the
``MDPRESS_LOG_DIR`` environment variable or the ``--log-dir`` CLI option.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _get_package_root() -> Path:
    """
    Determine the mdpress package directory.

    Assumes this file is at PACKAGE/core/paths.py.

    Returns:
        Path object for the package root

    Raises:
        RuntimeError: If the bundled assets directory is missing
    """
    current_file = Path(__file__).resolve()
    root = current_file.parent.parent

    if not (root / "assets").is_dir():
        raise RuntimeError(
            f"Cannot locate mdpress assets. "
            f"Expected {root / 'assets'} to exist. "
            f"Current file: {current_file}"
        )

    return root


# ----- Package -----
PACKAGE_DIR: Path = _get_package_root()

# ----- Assets -----
ASSETS_DIR = PACKAGE_DIR / "assets"

# ----- Logs -----
LOG_DIR = Path(
    os.environ.get("MDPRESS_LOG_DIR", str(Path.home() / ".mdpress" / "logs"))
).expanduser()
