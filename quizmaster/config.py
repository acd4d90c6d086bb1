from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from typing import List
import logging

load_dotenv()
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./database/quizmaster.db"

    # JWT Configuration
    secret_key: str = "your-super-secret-jwt-key-change-this-in-production"
    algorithm: str = "HS256"
    access_token_expire_days: int = 30

    # Tutor providers, tried in this order
    openai_api_key: str = ""
    anthropic_api_key: str = ""
    together_api_key: str = ""

    openai_model: str = "gpt-3.5-turbo"
    openai_base_url: str = "https://api.openai.com/v1"
    anthropic_model: str = "claude-3-haiku-20240307"
    anthropic_base_url: str = "https://api.anthropic.com/v1"
    together_model: str = "meta-llama/Llama-2-70b-chat-hf"
    together_base_url: str = "https://api.together.xyz/v1"

    tutor_max_tokens: int = 500
    tutor_temperature: float = 0.7
    tutor_timeout_seconds: float = 20.0

    # Application Configuration
    debug: bool = False

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore"
    }

    def configured_tutor_providers(self) -> List[str]:
        """Names of tutor providers whose API key looks valid"""
        checks = {
            "openai": self.openai_api_key.startswith("sk-"),
            "anthropic": self.anthropic_api_key.startswith("sk-ant-"),
            "together": self.together_api_key.startswith("sk-"),
        }

        configured = [name for name, ok in checks.items() if ok]
        if configured:
            logger.info(f"✅ Tutor providers configured: {', '.join(configured)}")
        else:
            logger.warning("⚠️ No tutor provider keys configured - using rule-based tutor")
            for name, ok in checks.items():
                logger.warning(f"{name.upper()}_API_KEY: {'✅' if ok else '❌'}")

        return configured


settings = Settings()
