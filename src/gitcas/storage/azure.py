"""Azure blob storage implementation."""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class AzureBlobObjectStorage:
    """
    Azure Blob Storage backend.

    Storage paths become blob names under an optional prefix:
    ``<prefix>/objects/aa/f4c6...``.
    """

    def __init__(self, client, container: str, prefix: str = ""):
        """
        Initialize Azure object storage.

        Args:
            client: azure.storage.blob.BlobServiceClient
            container: Container name
            prefix: Optional blob name prefix
        """
        self.client = client
        self.container = container
        self.prefix = prefix.strip("/") if prefix else ""

    @classmethod
    def from_connection_string(
        cls, connection_string: str, container: str, prefix: str = ""
    ) -> "AzureBlobObjectStorage":
        """
        Create storage from a connection string, creating the container if needed.

        Args:
            connection_string: Azure Storage connection string
            container: Container name
            prefix: Optional blob name prefix
        """
        try:
            from azure.storage.blob import BlobServiceClient
        except ImportError:
            raise ImportError(
                "azure-storage-blob required for Azure object storage. "
                "Install with: pip install 'gitcas[azure]'"
            )

        client = BlobServiceClient.from_connection_string(connection_string)
        container_client = client.get_container_client(container)
        if not container_client.exists():
            container_client.create_container()
        return cls(client, container, prefix)

    def get(self, path: str) -> Optional[bytes]:
        blob_client = self._blob_client(path)
        if not blob_client.exists():
            return None
        return blob_client.download_blob().readall()

    def write(self, path: str, data: bytes) -> None:
        self._blob_client(path).upload_blob(bytes(data), overwrite=True)
        logger.debug("Uploaded %d bytes to azure://%s/%s", len(data), self.container, self.key_for(path))

    def exists(self, path: str) -> bool:
        return self._blob_client(path).exists()

    def delete(self, path: str) -> None:
        blob_client = self._blob_client(path)
        if blob_client.exists():
            blob_client.delete_blob()

    def key_for(self, path: str) -> str:
        """Blob name for a storage path."""
        if not path:
            raise ValueError("Storage path cannot be empty")
        path = path.lstrip("/")
        return f"{self.prefix}/{path}" if self.prefix else path

    def _blob_client(self, path: str):
        return self.client.get_blob_client(container=self.container, blob=self.key_for(path))
