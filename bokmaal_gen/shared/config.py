# bokmaal_gen/shared/config.py
import os
from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Every field can be overridden with a BOKMAAL_-prefixed environment
    variable (e.g. BOKMAAL_MAX_CLAUSE_DEPTH=4) or a .env file.
    """

    # --- Application Meta ---
    APP_NAME: str = "Bokmaal Sentence Generator"
    LANG_CODE: str = "nb"

    # --- Logging ---
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Lexicon ---
    # Default to current working directory if not set
    FILESYSTEM_REPO_PATH: str = os.getcwd()
    LEXICON_PATH: str = os.path.join("data", "lexicon", "no.in")
    # Reject the whole file on the first malformed line instead of skipping it
    LEXICON_STRICT: bool = False

    # --- Grammar ---
    MAX_CLAUSE_DEPTH: int = Field(16, ge=0)
    # Legacy full-range auxiliary draw ("<modal> ha" almost always)
    LEGACY_PERFECT_AUXILIARY: bool = False

    # --- Dynamic Path Resolution ---

    @property
    def LEXICON_FILE(self) -> str:
        """
        Absolute path of the lexicon file.
        Relative LEXICON_PATH values are resolved against FILESYSTEM_REPO_PATH.
        """
        if os.path.isabs(self.LEXICON_PATH):
            return self.LEXICON_PATH
        return os.path.join(self.FILESYSTEM_REPO_PATH, self.LEXICON_PATH)

    model_config = SettingsConfigDict(
        env_prefix="BOKMAAL_", env_file=".env", extra="ignore"
    )


settings = Settings()
