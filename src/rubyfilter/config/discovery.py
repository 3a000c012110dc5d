"""Locate and read ``rubyfilter.toml``.

Lookup order: an explicit ``--config`` path, then ``RUBYFILTER_CONFIG``,
then a walk up from the working directory the way git finds ``.git/``.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "rubyfilter.toml"
CONFIG_ENV_VAR = "RUBYFILTER_CONFIG"


def find_config(start: Path | None = None, *, explicit: str | Path | None = None) -> Path | None:
    """Return the config file in effect, or None to run on defaults.

    Raises:
        click.ClickException: *explicit* names a file that does not exist.
    """
    if explicit is not None:
        path = Path(explicit)
        if not path.is_file():
            msg = f"Config file not found: {path}"
            raise click.ClickException(msg)
        return path

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: The file is not valid TOML.
    """
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
