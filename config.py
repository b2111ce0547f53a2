"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks RATCALC_.
"""
import sys

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging (stderr; stdout zostaje dla wyników)
    log_level: str = "WARNING"

    # REPL
    prompt: str = "> "
    quit_command: str = "QUIT"

    # Limit cyfr przy int <-> str; 0 = bez limitu
    int_max_str_digits: int = 0

    # App
    app_title: str = "RatCalc"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="RATCALC_", env_file=".env", extra="ignore")

    @field_validator("int_max_str_digits")
    @classmethod
    def _check_int_max_str_digits(cls, v: int) -> int:
        # sys.set_int_max_str_digits przyjmuje tylko 0 albo >= progu
        threshold = sys.int_info.str_digits_check_threshold
        if v != 0 and v < threshold:
            raise ValueError(f"must be 0 (unlimited) or at least {threshold}")
        return v
