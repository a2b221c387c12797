import asyncio
import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pathlib import Path
from typing import Optional
from abc import ABC, abstractmethod

from pickupnews.config import CONFIG
from pickupnews.errors import ConfigurationError, ObjectStoreReadError
from pickupnews.logging_config import create_logger


class ObjectStoreBackend(ABC):
    """Abstract base class for object store backends."""

    @abstractmethod
    async def read_object(self, bucket: str, key: str) -> bytes:
        """Read the raw bytes stored under bucket/key."""
        pass


class LocalFileSystemBackend(ObjectStoreBackend):
    """Local filesystem backend: bucket/key maps to <base_path>/<bucket>/<key>."""

    def __init__(self, base_path: str):
        self.base_path = Path(base_path)

    async def read_object(self, bucket: str, key: str) -> bytes:
        file_path = self.base_path / bucket / key
        try:
            loop = asyncio.get_event_loop()
            return await loop.run_in_executor(None, file_path.read_bytes)
        except OSError as e:
            raise ObjectStoreReadError(f"Unable to read {file_path}: {e}") from e


class S3Backend(ObjectStoreBackend):
    """S3 backend for object storage."""

    def __init__(self, s3_client=None):
        self.s3_client = s3_client or self._create_client()

    def _create_client(self):
        if CONFIG.S3_ACCESS_KEY_ID:
            session = boto3.Session(
                aws_access_key_id=CONFIG.S3_ACCESS_KEY_ID,
                aws_secret_access_key=CONFIG.S3_SECRET_ACCESS_KEY,
                region_name=CONFIG.S3_REGION,
            )
        else:
            # Shared credentials / instance role, optionally a named profile
            session = boto3.Session(profile_name=CONFIG.AWS_PROFILE, region_name=CONFIG.S3_REGION)

        return session.client('s3', endpoint_url=CONFIG.S3_ENDPOINT_URL)

    def _download(self, bucket: str, key: str) -> bytes:
        body = self.s3_client.get_object(Bucket=bucket, Key=key)['Body']
        try:
            return body.read()
        finally:
            body.close()

    async def read_object(self, bucket: str, key: str) -> bytes:
        try:
            loop = asyncio.get_event_loop()
            return await loop.run_in_executor(None, lambda: self._download(bucket, key))
        except (ClientError, BotoCoreError) as e:
            raise ObjectStoreReadError(f"Unable to read s3://{bucket}/{key}: {e}") from e


class ObjectStore:
    """
    Read-only object store used to fetch keyword rule lists, with configurable backends.
    """

    def __init__(self, backend: Optional[ObjectStoreBackend] = None):
        self.backend = backend or self._create_backend()
        self.logger = create_logger("ObjectStore")

    def _create_backend(self) -> ObjectStoreBackend:
        """Create the appropriate backend based on configuration."""
        store_type = CONFIG.OBJECT_STORE_TYPE.lower()

        if store_type == 'local':
            return LocalFileSystemBackend(CONFIG.OBJECT_STORE_BASE_PATH)
        elif store_type == 's3':
            try:
                return S3Backend()
            except BotoCoreError as e:
                raise ObjectStoreReadError(f"Unable to create S3 client: {e}") from e
        else:
            raise ConfigurationError(f"Unsupported object store type: {store_type}")

    async def read_bytes(self, bucket: str, key: str) -> bytes:
        """
        Fetch an object.

        Args:
            bucket: Bucket name (a directory under the base path for the local backend)
            key: Object key

        Returns:
            Raw object content

        Raises:
            ObjectStoreReadError: the object could not be fetched
        """
        self.logger.info(f"Reading object {key} from bucket {bucket}")
        content = await self.backend.read_object(bucket, key)
        self.logger.info(f"Read {len(content)} bytes from {bucket}/{key}")
        return content
