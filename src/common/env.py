"""Environment configuration interface for the museum API.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def collection_base_url() -> str:
        """Get the origin of the museum collections website.

        Returns:
            Base URL without trailing slash, defaults to 'https://collections.louvre.fr'
        """
        return os.getenv("COLLECTION_BASE_URL", "https://collections.louvre.fr").rstrip("/")

    @staticmethod
    def ark_prefix() -> str:
        """Get the ARK path segment that prefixes every artwork identifier.

        Returns:
            ARK prefix, defaults to 'ark:/53355'
        """
        return os.getenv("COLLECTION_ARK_PREFIX", "ark:/53355").strip("/")

    @staticmethod
    def page_size() -> int:
        """Get the number of cards on one search results page.

        Returns:
            Page size, defaults to 20
        """
        return int(os.getenv("COLLECTION_PAGE_SIZE", "20"))

    @staticmethod
    def user_agent() -> str:
        """Get the User-Agent sent with outbound requests.

        Returns:
            User-Agent string, defaults to 'museum-api/0.1.0'
        """
        return os.getenv("COLLECTION_USER_AGENT", "museum-api/0.1.0")

    @staticmethod
    def cors_origins() -> list[str]:
        """Get the origins allowed by the CORS middleware.

        Returns:
            List of origins parsed from comma-separated CORS_ORIGINS, defaults to ['*']
        """
        raw = os.getenv("CORS_ORIGINS", "*")
        origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
        return origins or ["*"]

    @staticmethod
    def log_level() -> str:
        """Get the default log level.

        Returns:
            Upper-cased level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()


# Singleton instance for convenient access
env = Environment()
