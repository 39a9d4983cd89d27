"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings

from findingdesk.models.enums import Supplier


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite+aiosqlite:///findingdesk.db"

    # Logging
    log_level: str = "info"
    json_logs: bool = False

    # CORS
    cors_allowed_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Editor defaults
    default_supplier: str = Supplier.IVENTION.value
    overview_path: str = "/supplieroverview"

    # Stamped into history entries when the actor has no email
    unknown_actor_email: str = "Onbekend"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "FINDINGDESK_",
    }

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


settings = Settings()
