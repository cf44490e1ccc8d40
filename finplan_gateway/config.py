"""Configuration management using Pydantic Settings"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "finplan-gateway"
    log_level: str = "INFO"

    # Browser front end origins (JSON list in env)
    allowed_origins: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    # Goal planning
    max_goal_duration_years: float = 30.0
    duration_search_max_years: int = 50
    step_up_rate_pct: float = 10.0

    # Home loan policy
    safe_emi_ratio: float = 0.4
    comfortable_emi_ratio: float = 0.8

    # Allocation table override; None uses the table shipped with the package
    allocation_table_path: Optional[str] = None


settings = Settings()
