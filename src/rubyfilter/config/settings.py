"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``RUBYFILTER_*`` prefix, ``__`` between section and key
  3. TOML file: the ``config_path`` passed at construction
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, InitSettingsSource, PydanticBaseSettingsSource

from rubyfilter.config.discovery import find_config, read_config
from rubyfilter.config.models import FilterConfig, RenderConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read the ``[render]`` and ``[filter]`` tables of a ``rubyfilter.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_config(toml_path) if toml_path else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class RubySettings(BaseSettings):
    """Unified settings for the rubyfilter CLI.

    Attributes:
        config_path: The TOML file in effect, or None when running on
            defaults. It is also where the TOML source reads from.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RUBYFILTER_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    render: RenderConfig = Field(default_factory=RenderConfig)
    filter: FilterConfig = Field(default_factory=FilterConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source named by ``config_path`` below env vars."""
        toml_path: Path | None = None
        if isinstance(init_settings, InitSettingsSource):
            raw_path = init_settings.init_kwargs.get("config_path")
            toml_path = Path(raw_path) if raw_path else None
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> RubySettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* or discovers ``rubyfilter.toml`` from
        *start*. Flags passed as None are left to the lower sources.

        Raises:
            click.ClickException: The config file is missing or invalid, or
                a value from any source fails validation.
        """
        toml_path = find_config(start, explicit=config_path)
        overrides = {key: value for key, value in cli_flags.items() if value is not None}
        try:
            return cls(config_path=toml_path, **overrides)
        except ValidationError as exc:
            raise click.ClickException(_describe_invalid(exc, toml_path)) from exc


def _describe_invalid(exc: ValidationError, toml_path: Path | None) -> str:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    origin = f" (config file: {toml_path})" if toml_path else ""
    return f"Invalid configuration{origin}: {problems}"
