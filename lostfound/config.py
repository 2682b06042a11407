"""
Lost & Found application settings.

Extends the base settings with registry-specific configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Lost & Found specific settings."""

    # ==========================================================================
    # Identity
    # ==========================================================================
    # Create the admin/student/staff demo accounts on an empty registry
    SEED_SAMPLE_USERS: bool = True

    # ==========================================================================
    # Matching & Claims
    # ==========================================================================
    # Never match a report against another report by the same user
    MATCH_EXCLUDE_OWN_REPORTS: bool = True

    # Advisory claims stay possible after an item is marked claimed
    ALLOW_CLAIMS_ON_CLAIMED_ITEMS: bool = True

    # ==========================================================================
    # Images
    # ==========================================================================
    MAX_IMAGE_BYTES: int = 5 * 1024 * 1024
    ALLOWED_IMAGE_EXTENSIONS: str = "png,jpg,jpeg,gif,webp"  # Comma-separated

    def get_allowed_image_extensions(self) -> list:
        """Parse ALLOWED_IMAGE_EXTENSIONS into a list."""
        return [ext.strip().lower() for ext in self.ALLOWED_IMAGE_EXTENSIONS.split(",") if ext.strip()]


# Global settings instance
settings = Settings()
