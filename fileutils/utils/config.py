"""Configuration loading and management."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Optional, Any
import yaml


@dataclass
class ProjectConfig:
    name: str = "fileutils"
    description: str = "Crash-on-failure filesystem helpers"
    version: str = "0.1.0"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    console: bool = True
    json_file: bool = True
    log_dir: Optional[str] = None


@dataclass
class FileOpsConfig:
    atomic_writes: bool = False


@dataclass
class Config:
    """Main configuration container."""
    project: ProjectConfig = field(default_factory=ProjectConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    file_ops: FileOpsConfig = field(default_factory=FileOpsConfig)

    # Root path for resolving relative paths
    root_path: Path = field(default_factory=lambda: Path.cwd())

    def resolve_path(self, path: str) -> Path:
        """Resolve a relative path to absolute."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self.root_path / p

    @property
    def logs_path(self) -> Optional[Path]:
        if not self.logging.log_dir:
            return None
        return self.resolve_path(self.logging.log_dir)


def _dict_to_dataclass(cls, data: Dict[str, Any]):
    """Recursively convert a dictionary to a dataclass instance."""
    if data is None:
        return cls()

    field_types = {f.name: f.type for f in cls.__dataclass_fields__.values()}
    kwargs = {}

    for key, value in data.items():
        if key in field_types:
            field_type = field_types[key]
            # Check if it's a dataclass
            if hasattr(field_type, '__dataclass_fields__') and isinstance(value, dict):
                kwargs[key] = _dict_to_dataclass(field_type, value)
            else:
                kwargs[key] = value

    return cls(**kwargs)


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, looks for
            configs/config.yaml and then config.yaml in the working directory

    Returns:
        Config object with all settings
    """
    if config_path is None:
        candidates = [
            Path.cwd() / "configs" / "config.yaml",
            Path.cwd() / "config.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                config_path = str(candidate)
                break
        else:
            return Config()

    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r') as f:
        data = yaml.safe_load(f) or {}

    config = Config(root_path=config_file.resolve().parent)

    if 'project' in data:
        config.project = _dict_to_dataclass(ProjectConfig, data['project'])
    if 'logging' in data:
        config.logging = _dict_to_dataclass(LoggingConfig, data['logging'])
    if 'file_ops' in data:
        config.file_ops = _dict_to_dataclass(FileOpsConfig, data['file_ops'])

    return config
