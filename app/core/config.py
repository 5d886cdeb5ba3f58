import logging
from typing import List, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Application Information
    app_name: str = Field(default="E-Learning Marketplace")
    app_description: str = Field(
        default="Course catalog, enrollments, reviews and blog API"
    )
    app_version: str = Field(default="1.0.0")
    app_url: str = Field(default="http://localhost:8000")
    frontend_url: str = Field(default="http://localhost:5173")
    debug: bool = Field(default=True)
    production: bool = Field(default=False)

    # Storage: "memory" keeps everything in-process, "database" uses SQLAlchemy
    storage_driver: str = Field(default="memory", pattern="^(memory|database)$")

    # Database Configuration (only used by the database driver)
    database_url: Optional[str] = Field(default=None)
    db_host: str = Field(default="127.0.0.1")
    db_port: int = Field(default=5432)
    db_database: str = Field(default="e-learning")
    db_username: str = Field(default="postgres")
    db_password: str = Field(default="postgres")

    # Security Settings
    cors_allowed_origins: List[str] = Field(default=["http://localhost:5173"])

    # JWT / Session Configuration
    jwt_secret: str = Field(default="your-secret-key-change-in-production")
    jwt_algorithm: str = Field(default="HS256")
    jwt_user_expiration: int = Field(default=7)  # days
    jwt_issuer: str = Field(default="E-Learning Marketplace")
    session_cookie_name: str = Field(default="session")
    session_cookie_secure: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="info")
    log_file: str = Field(default="logs/app.log")

    # Pagination
    course_page_size: int = Field(default=50)
    blog_page_size: int = Field(default=20)
    user_page_size: int = Field(default=50)
    max_page_size: int = Field(default=200)

    # Admin Defaults
    admin_default_username: str = Field(default="admin")
    admin_default_email: str = Field(default="admin@example.com")
    admin_default_password: str = Field(default="Admin@123")

    # Payment
    payment_currency: str = Field(default="USD")

    # Seed default categories on startup
    seed_demo_data: bool = Field(default=True)

    # ============================
    # Generic comma-separated parser
    # ============================
    @staticmethod
    def _parse_csv(value, default):
        if isinstance(value, str):
            items = [x.strip() for x in value.split(",") if x.strip()]
            return items if items else default
        if isinstance(value, list):
            return value
        return default

    @field_validator("cors_allowed_origins", mode="before")
    def validate_cors(cls, v):
        return cls._parse_csv(v, ["http://localhost:5173"])

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return "postgresql+psycopg2://{user}:{password}@{host}:{port}/{database}".format(
            user=self.db_username,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_database,
        )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def load_settings():
    try:
        return Settings()
    except ValidationError as e:
        logger.error(f"Invalid settings: {e}")
        raise


settings = load_settings()
