from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    debug: bool = False

    # Logging (stderr only, stdout carries the action protocol)
    log_level: str = "WARNING"
    log_candidate_scores: bool = False  # log every candidate utility at DEBUG

    # Output
    sign_actions: bool = True  # append hero name + incantation to each action line

    class Config:
        env_prefix = "SPELLGUARD_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
