"""Configuration management for bucket-browser."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    log_format: str = "json"
    otel_enabled: bool = False
    otel_service_name: str = "bucket-browser"
    otel_exporter_endpoint: str = "http://localhost:4317"

    # Listing
    page_size: int = 1000
    max_pages: int = 10_000

    # Presentation
    root_label: str = "Root"
    show_hidden_files: bool = True
    sort_by: str = "name"
    sort_direction: str = "asc"

    auxiliary_workers: int = 4

    model_config = {
        "env_prefix": "BUCKET_BROWSER_",
        "case_sensitive": False,
    }


settings = Settings()
