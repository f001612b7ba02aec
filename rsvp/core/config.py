"""
Configuration settings for the application
"""

from pydantic import EmailStr
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings, read once at start-up"""

    model_config = SettingsConfigDict(env_file=".env", frozen=True)

    # Server
    PORT: int = 8000
    BIND_ADDRESS: str = "127.0.0.1"
    HOST: str = "localhost"

    # Branding
    ORGANISER_NAME: str = "Event Organiser"

    # Storage
    DB_PATH: str = "./events.db"

    # Rendering
    TEMPLATE_DIR: str = "templates"
    STATIC_DIR: str = "static"

    # Notifications
    NOTIFY_EMAIL: EmailStr = "organiser@example.com"
    MAILGUN_FROM_NAME: str = "Event RSVP"
    MAILGUN_FROM_EMAIL_PREFIX: str = "rsvp"
    MAILGUN_API_KEY: str = ""
    MAILGUN_API_BASE: str = "https://api.mailgun.net/v3"

    # Security
    INSERT_PASSWORD: str = "change-me"

    @property
    def database_url(self) -> str:
        return f"sqlite:///{self.DB_PATH}"

    @property
    def mail_sender(self) -> str:
        return f"{self.MAILGUN_FROM_NAME} <{self.MAILGUN_FROM_EMAIL_PREFIX}@{self.HOST}>"

settings = Settings()

def get_settings() -> Settings:
    """Dependency returning the process-wide settings"""
    return settings
