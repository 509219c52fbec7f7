"""애플리케이션 설정"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
import os


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # Gemini
    google_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash"
    llm_temperature: float = 0.7

    # 입력 검증
    dream_text_min_length: int = 20
    dream_text_max_length: int = 2000
    min_birth_year: int = 1900

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Application
    debug: bool = False

    @property
    def resolved_api_key(self) -> Optional[str]:
        """GOOGLE_API_KEY 또는 GOOGLE_GENERATIVE_AI_API_KEY 중 설정된 키"""
        key = self.google_api_key or os.getenv("GOOGLE_GENERATIVE_AI_API_KEY")
        if key and key.strip():
            return key.strip()
        return None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
