"""Configuration management for OPZ Backup."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from ruamel.yaml import YAML

from .util.logging import LOG_LEVELS
from .util.paths import default_backup_root

CONFIG_FILE = ".config/opz-backup/config.yaml"


class BackupSettings(BaseModel):
    """Runtime settings for a backup run."""

    backup_root: Path = Field(
        default_factory=default_backup_root,
        description="Directory under which timestamped snapshots are created"
    )
    device_pattern: str = Field(
        default="OP-Z",
        min_length=1,
        description="Case-sensitive fragment matched against mount point names"
    )
    label_width: int = Field(default=50, ge=4, description="Maximum width of the current-file label")
    buffer_size: int = Field(default=64000, gt=0, description="Copy buffer size in bytes")

    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file")

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        name = value.upper()
        if name not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return name

    class Config:
        """Pydantic configuration."""

        validate_assignment = True


def load_config(config_path: Optional[Path] = None) -> BackupSettings:
    """Load settings from a YAML file, or defaults when the file is absent."""

    if config_path is None:
        config_path = Path.home() / CONFIG_FILE

    if not config_path.exists():
        return BackupSettings()

    yaml = YAML(typ="safe")
    with open(config_path, "r") as f:
        data = yaml.load(f) or {}
    return BackupSettings(**data)


def save_config(settings: BackupSettings, config_path: Optional[Path] = None) -> Path:
    """Save settings to a YAML file."""

    if config_path is None:
        config_path = Path.home() / CONFIG_FILE

    config_path.parent.mkdir(parents=True, exist_ok=True)

    yaml = YAML()
    yaml.default_flow_style = False

    with open(config_path, "w") as f:
        yaml.dump(settings.model_dump(mode="json", exclude_none=True), f)

    return config_path
