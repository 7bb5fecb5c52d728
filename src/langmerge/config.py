"""Build configuration for langmerge."""

from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from langmerge.kernel.discovery import DEFAULT_LANG_FILENAME

DEFAULT_DESTINATION = "www/assets/lang"
DEFAULT_OUTPUT_NAME = "en.json"


class BuildConfig(BaseModel):
    """Where the merged dictionary goes and how candidates are resolved."""
    destination: Path = Field(default=Path(DEFAULT_DESTINATION), description="Directory the merged file is written to (relative to the config file when loaded from one)")
    output_name: str = Field(default=DEFAULT_OUTPUT_NAME, description="Filename of the merged file")
    default_filename: str = Field(default=DEFAULT_LANG_FILENAME, description="Filename appended to directory candidates")
    report_collisions: bool = Field(default=True, description="Record overwritten keys as KEY_COLLISION warnings")

    model_config = ConfigDict(extra="forbid")

    @field_validator("output_name", "default_filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Filenames must be bare names, not paths."""
        if not v or "/" in v or "\\" in v:
            raise ValueError(f"'{v}' must be a plain filename without directory separators")
        return v

    @property
    def output_path(self) -> Path:
        return self.destination / self.output_name

    @classmethod
    def from_json_bytes(cls, data: bytes) -> "BuildConfig":
        """Load configuration from JSON bytes (pure, no I/O)."""
        return cls.model_validate_json(data)


def load_config_from_path(path: Union[str, Path]) -> BuildConfig:
    """Load build configuration from a JSON file path.

    A relative ``destination`` is taken relative to the config file's directory.
    """
    config_path = Path(path)
    config = BuildConfig.from_json_bytes(config_path.read_bytes())
    if config.destination.is_absolute():
        return config
    return config.model_copy(update={"destination": config_path.parent / config.destination})
