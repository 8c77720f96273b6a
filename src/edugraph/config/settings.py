"""EduSettings — one frozen object for CLI flags, env vars, and edugraph.toml.

Sources, strongest first:

1. keyword arguments (the CLI flags Click parsed)
2. ``EDUGRAPH_*`` environment variables, ``__`` separating nested keys
   (``EDUGRAPH_STORE__BUSY_TIMEOUT_MS=250``)
3. the TOML file named by ``config_path``
4. defaults on the section models
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from edugraph.config.discovery import find_config
from edugraph.config.models import PolicyConfig, StoreConfig


class EduSettings(BaseSettings):
    """Resolved settings for one edugraph invocation.

    Attributes:
        project_root: Directory the store path is relative to. Defaults to
            the directory holding the config file, else the CWD.
        config_path: The TOML file that was read, if any.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="EDUGRAPH_",
        env_nested_delimiter="__",
    )

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    store: StoreConfig = Field(default_factory=StoreConfig)
    policy: PolicyConfig = Field(default_factory=PolicyConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # The file to read travels in as the ``config_path`` init kwarg.
        init_kwargs: dict[str, Any] = getattr(init_settings, "init_kwargs", {})
        toml_file = init_kwargs.get("config_path")
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> EduSettings:
        """Build settings for a CLI run.

        An explicit *config_path* that does not exist is ignored rather
        than falling back to discovery. Without one, ``edugraph.toml`` is
        searched for upward from *project_root* (or the CWD).
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(project_root)

        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        return cls(project_root=project_root, config_path=toml_path, **cli_flags)
