from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    supabase_url: str = Field(
        default="",
        validation_alias=AliasChoices("supabase_url", "SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL"),
    )
    supabase_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "supabase_key",
            "SUPABASE_KEY",
            "SUPABASE_SERVICE_KEY",
            "NEXT_PUBLIC_SUPABASE_ANON_KEY",
        ),
    )
    tracking_table: str = "calculation_tracking"
    sessions_table: str = "roi_calculations"
    anonymous_user_id: str = "anonymous"
    db_timeout_seconds: float = 5.0
    tracking_max_retries: int = 1
    tracking_retry_backoff_seconds: float = 0.4
    allowed_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"
