"""Locate ``edugraph.toml``.

Lookup order: the ``EDUGRAPH_CONFIG`` environment variable, then the
first ``edugraph.toml`` found in the start directory or any ancestor.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "edugraph.toml"
CONFIG_ENV_VAR = "EDUGRAPH_CONFIG"


def _candidates(start: Path) -> Iterator[Path]:
    base = start.resolve()
    for directory in (base, *base.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    An ``EDUGRAPH_CONFIG`` pointing at a missing file disables the
    walk-up instead of falling back to it.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None
    return next((c for c in _candidates(start or Path.cwd()) if c.is_file()), None)
