from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class DecoderSettings(BaseSettings):
    # Missing command segments become "" instead of raising CommandPathError.
    lenient_command_path: bool = Field(False, validation_alias="HEOS_LENIENT_COMMAND_PATH")

    log_level: str = Field("INFO", validation_alias="HEOS_LOG_LEVEL")
    log_ring_size: int = Field(200, validation_alias="HEOS_LOG_RING_SIZE")
    log_preview_bytes: int = Field(64, validation_alias="HEOS_LOG_PREVIEW_BYTES")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore", frozen=True
    )


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
