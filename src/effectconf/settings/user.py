"""User-configurable bootstrap settings loaded from effectconf.yaml."""

from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from effectconf.constants import CONFIG_ENV_VAR
from effectconf.utils.env import interpolate_env

# Load environment variables from .env file(s)
load_dotenv()


class StoreSettings(BaseModel):
    """Settings describing where configuration values come from.

    ``load_paths`` lists the YAML value files in override order: keys in
    later files win over keys in earlier ones.
    """

    # Default search paths for the settings file
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("effectconf.yaml"),
        Path("~/.config/effectconf/effectconf.yaml").expanduser(),
        Path("/etc/effectconf/effectconf.yaml"),
    ]

    load_paths: list[Path] = Field(
        ..., min_length=1, description="Value files to load, later files override earlier"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v

    def resolve_paths(self, base_dir: Path) -> StoreSettings:
        """Return a copy with relative load paths anchored at *base_dir*."""
        paths = [p if p.is_absolute() else base_dir / p for p in self.load_paths]
        return self.model_copy(update={"load_paths": paths})

    @classmethod
    def load(cls, path: Path | None = None) -> StoreSettings:
        """Load settings from a YAML file.

        Args:
            path: Path to settings file (optional, searches default locations if None)

        Returns:
            Validated StoreSettings with load paths resolved against the file's directory

        Raises:
            FileNotFoundError: If no settings file is found
            RuntimeError: If the settings file cannot be parsed or is invalid
        """
        if path is None:
            # Check environment variable first
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Settings file from {CONFIG_ENV_VAR} not found: {path}")
            else:
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        f"No settings file found. Create effectconf.yaml or set {CONFIG_ENV_VAR}."
                    )

        import yaml  # local import to avoid hard dep for callers

        try:
            raw = interpolate_env(path.read_text())
            data = yaml.safe_load(raw)
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"Unable to read settings YAML: {exc}") from exc

        try:
            settings = cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid settings:\n{err}") from err
        return settings.resolve_paths(path.parent)
