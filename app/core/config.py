from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # .env wird automatisch gelesen
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "TooltipReviewAPI"
    environment: str = "dev"
    log_level: str = "INFO"

    # Review-Schwellen (siehe ReviewThresholds)
    min_word_count: int = 50
    plain_language_min_score: float = 60.0

    # Enhancer: ab dieser Länge (+ Metriken + Beispiele) bleibt ein Tooltip unverändert
    enhance_min_length: int = 200
    # None -> nicht deterministisch; in Tests/Reports fest setzen
    enhancer_seed: Optional[int] = None

    report_max_examples: int = 5
    report_output_dir: str = "results/tooltip_review"


settings = Settings()
