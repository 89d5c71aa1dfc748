"""Application configuration loaded from environment variables."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringStrategy(str, Enum):
    """Keyword ranking formulas."""

    LENGTH_BIASED_FREQUENCY = "length-biased-frequency"
    TF_IDF = "tf-idf"


class Settings(BaseSettings):
    """Global application settings."""

    minimum_input_length: int = Field(
        default=0,
        ge=0,
        description="Minimum stripped input length accepted by the analyzer. 0 means no minimum.",
    )
    max_keywords: int = Field(default=20, ge=1)
    phrase_weight_multiplier: float = Field(default=2.0, gt=0)
    scoring_strategy: ScoringStrategy = ScoringStrategy.LENGTH_BIASED_FREQUENCY

    short_line_max_length: int = Field(default=80, ge=1)
    longer_line_ratio: float = Field(default=1.5, gt=0)
    skip_sentence_lines: bool = Field(
        default=False,
        description="Stop short lines ending in sentence punctuation from counting as headings.",
    )

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="MEMORY_LAYERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
