from typing import List, Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # FAQ corpus: local JSON file path or http(s) URL
    faq_source: str = "data/faq.json"
    faq_fetch_timeout: float = 15.0  # seconds

    session_max_messages: int = 200

    greeting: str = (
        "Hello! I'm a virtual assistant. Ask me a question about our "
        "services, fees, or how to schedule a consultation."
    )

    # Origin(s) of the website embedding the chat widget
    cors_origins: List[str] = ["http://localhost:3000"]

    # Enables POST /faq/reload when set
    admin_api_key: Optional[SecretStr] = None

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )

settings = Settings()
