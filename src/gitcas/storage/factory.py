"""Factory for creating object storage backends."""

import logging
import os

from ..config import StorageConfig
from .azure import AzureBlobObjectStorage
from .base import ObjectStorage
from .fs import FilesystemObjectStorage
from .memory import MemoryObjectStorage

logger = logging.getLogger(__name__)


def validate_azure_config(config: StorageConfig) -> None:
    """
    Early validation of Azure configuration.

    Raises:
        ValueError: If configuration is invalid
    """
    if not config.container:
        raise ValueError("storage.container required for Azure object storage")

    if "AZURE_STORAGE_CONNECTION_STRING" not in os.environ:
        raise ValueError(
            "Set AZURE_STORAGE_CONNECTION_STRING and storage.container "
            "for Azure object storage"
        )


def make_object_storage(config: StorageConfig) -> ObjectStorage:
    """
    Create a storage backend from configuration.

    Raises:
        ValueError: If configuration is invalid
        NotImplementedError: If provider is not supported
    """
    if config.provider == "memory":
        logger.debug("Using in-memory object storage")
        return MemoryObjectStorage()

    elif config.provider == "fs":
        root = config.resolved_root
        logger.debug("Using filesystem object storage at %s", root)
        return FilesystemObjectStorage(root)

    elif config.provider == "azure":
        validate_azure_config(config)
        conn_str = os.environ["AZURE_STORAGE_CONNECTION_STRING"]
        logger.debug("Using Azure object storage in container %s", config.container)
        return AzureBlobObjectStorage.from_connection_string(conn_str, config.container, config.prefix)

    else:
        raise NotImplementedError(f"Provider {config.provider} not supported")
