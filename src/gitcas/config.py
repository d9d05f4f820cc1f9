"""Configuration for gitcas stores.

Configuration only selects and tunes the outer layers (storage backend,
compression level, hash algorithm for writes). The object operations in
``gitcas.store`` read nothing from here: callers pass values explicitly.
"""

from pathlib import Path
from typing import Literal, Optional

import platformdirs
import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from .constants import APP_NAME, CONFIG_FILE, DEFAULT_COMPRESSION_LEVEL
from .errors import ConfigError
from .hashing import HashAlgorithm


def default_store_root() -> Path:
    """Platform-appropriate default directory for the filesystem backend."""
    return Path(platformdirs.user_data_dir(APP_NAME, APP_NAME))


class StorageConfig(BaseModel):
    """
    Where objects are stored.

    Providers:
    - "fs" (default): directory on local disk
    - "memory": process-local dictionary, mostly for testing
    - "azure": Azure Blob Storage (needs AZURE_STORAGE_CONNECTION_STRING)
    """
    provider: Literal["fs", "memory", "azure"] = "fs"
    root: Optional[Path] = None     # fs only; defaults to the platform data dir
    container: str = ""             # azure container name
    prefix: str = ""                # optional blob name prefix

    @model_validator(mode="after")
    def _validate(self):
        if self.provider == "azure" and not self.container:
            raise ValueError("storage.container required for azure provider")
        return self

    @property
    def resolved_root(self) -> Path:
        """Filesystem root, falling back to the platform default."""
        return Path(self.root).expanduser() if self.root else default_store_root()


class CASConfig(BaseModel):
    """Top-level configuration (stored in gitcas.yaml)."""
    storage: StorageConfig = Field(default_factory=StorageConfig)
    compression_level: int = Field(DEFAULT_COMPRESSION_LEVEL, ge=-1, le=9)
    algorithm: HashAlgorithm = HashAlgorithm.SHA1


def load_config(path: Optional[Path] = None) -> CASConfig:
    """Load configuration from YAML.

    Args:
        path: Config file. If None, gitcas.yaml in the current directory is
            used when present, otherwise defaults.

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ConfigError: If the file is not valid YAML or has invalid values
    """
    if path is None:
        path = Path.cwd() / CONFIG_FILE
        if not path.exists():
            return CASConfig()
    else:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    try:
        return CASConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}:\n{e}") from e


def save_config(config: CASConfig, path: Path) -> None:
    """Write configuration as YAML."""
    data = config.model_dump(mode="json", exclude_none=True)
    Path(path).write_text(yaml.safe_dump(data, sort_keys=False))
