from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Third-party allergen API
    allergen_api_url: str = "https://task.cover360.co.in/api/allergens"
    allergen_api_timeout: float = 15.0

    # Server Configuration
    port: int = 3001
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]
    cors_max_age: int = 86400  # Browsers may cache preflight for a day

    # Session behaviour
    clear_cache_on_upload: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False  # Allow ALLERGEN_API_URL or allergen_api_url


# Create singleton instance
settings = Settings()
