# travelai/config.py
import os
from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import List, Optional
from dotenv import load_dotenv
load_dotenv()

class Settings(BaseSettings):
    # Application Settings
    max_days: int = 30
    allowed_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    recommendation_count: int = 12
    trending_count: int = 6
    chat_history_window: int = 10

    # Chat completion API (OpenAI compatible)
    openai_api_key: str = ""
    openai_api_url: str = "https://api.openai.com/v1/chat/completions"
    openai_model: str = "gpt-4o"
    openai_itinerary_model: str = "gpt-4o-mini"

    # Public reference APIs
    wikipedia_api_url: str = "https://en.wikipedia.org/w/api.php"
    wikivoyage_api_url: str = "https://en.wikivoyage.org/w/api.php"
    wikimedia_api_url: str = "https://commons.wikimedia.org/w/api.php"
    http_user_agent: str = "TravelAI/0.1 (travel planning demo)"
    # None means wait indefinitely
    request_timeout_seconds: Optional[float] = None

    # Image search proxy
    pexels_api_key: str = ""
    pexels_api_url: str = "https://api.pexels.com/v1/search"

    # Local persisted UI state
    store_dir: str = ".travelai"
    store_name: str = "travelai-storage"

    # Firebase (identity + user documents)
    firebase_web_api_key: str = ""
    identity_toolkit_url: str = "https://identitytoolkit.googleapis.com/v1"

    # Google Cloud Configuration
    project_id: str = ""
    port: int = 8080

    # Pydantic V2 configuration (Python 3.13 compatible)
    model_config = ConfigDict(
        env_file=".env",
        extra="ignore"  # Allow extra environment variables without validation errors
    )

    @property
    def firebase_configured(self) -> bool:
        return bool(self.firebase_web_api_key) and self.firebase_web_api_key not in (
            "your_firebase_api_key_here",
            "demo-key",
        )

class CloudRunConfig:
    """Configuration for Cloud Run deployment"""

    # Environment Detection
    IS_CLOUD_RUN: bool = os.getenv("K_SERVICE") is not None

    # Google Cloud Configuration
    PROJECT_ID: str = os.getenv("GOOGLE_CLOUD_PROJECT", "")
    PORT: int = int(os.getenv("PORT", "8080"))

settings = Settings()
cloud_config = CloudRunConfig()
