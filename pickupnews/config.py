from typing import Optional
import os
from dotenv import load_dotenv

from pickupnews.errors import ConfigurationError

load_dotenv()


class Config:
    """configuration class for environment variable"""

    # Logging
    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv('LOG_LEVEL', 'info')

    # Credentials
    @property
    def PICKUPNEWS_APIKEY(self) -> Optional[str]:
        """NewsAPI api key"""
        return os.getenv('PICKUPNEWS_APIKEY')

    @property
    def PICKUPNEWS_WEBHOOKURL(self) -> Optional[str]:
        """Slack incoming webhook url"""
        return os.getenv('PICKUPNEWS_WEBHOOKURL')

    # News Query Settings
    @property
    def NEWS_API_URL(self) -> str:
        return os.getenv('NEWS_API_URL', 'http://newsapi.org/v2/everything')

    @property
    def HTTP_TIMEOUT_SECONDS(self) -> float:
        return float(os.getenv('HTTP_TIMEOUT_SECONDS', '30'))

    @property
    def TARGET_TIMEZONE(self) -> str:
        return os.getenv('TARGET_TIMEZONE', 'Asia/Tokyo')

    @property
    def PICKUPNEWS_STOP_AT_FIRST_BELOW_LIMIT(self) -> bool:
        """Return right after the first keyword below its notice lower limit (legacy behaviour)"""
        return os.getenv('PICKUPNEWS_STOP_AT_FIRST_BELOW_LIMIT', 'false').lower() in ('1', 'true', 'yes')

    # Object Store Settings
    @property
    def OBJECT_STORE_TYPE(self) -> str:
        """Object store type: 'local' or 's3'"""
        return os.getenv('OBJECT_STORE_TYPE', 's3')

    @property
    def OBJECT_STORE_BASE_PATH(self) -> str:
        """Base path for local file system object store"""
        return os.getenv('OBJECT_STORE_BASE_PATH', 'storage/objects')

    # S3 Object Store Settings
    @property
    def S3_REGION(self) -> Optional[str]:
        return os.getenv('S3_REGION')

    @property
    def S3_ACCESS_KEY_ID(self) -> Optional[str]:
        return os.getenv('S3_ACCESS_KEY_ID')

    @property
    def S3_SECRET_ACCESS_KEY(self) -> Optional[str]:
        return os.getenv('S3_SECRET_ACCESS_KEY')

    @property
    def S3_ENDPOINT_URL(self) -> Optional[str]:
        """S3 endpoint URL (for S3-compatible services like MinIO)"""
        return os.getenv('S3_ENDPOINT_URL')

    @property
    def AWS_PROFILE(self) -> Optional[str]:
        """Named profile from the shared AWS config, used when no access key is set"""
        return os.getenv('AWS_PROFILE')

    def require_credentials(self) -> None:
        missing = [
            name for name in ('PICKUPNEWS_APIKEY', 'PICKUPNEWS_WEBHOOKURL')
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")


CONFIG = Config()

__all__ = ["Config", "CONFIG"]
