import os
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "UTILBELT_"


class Settings(BaseModel):
    """Library-wide defaults, overridable through ``UTILBELT_*`` env vars."""

    model_config = ConfigDict(frozen=True)

    LOG_LEVEL: str = Field("WARNING", description="Level of the package logger.")
    CURRENCY_DELIMITER: str = Field(",", description="Thousands separator.")
    CURRENCY_PRECISION: int = Field(2, ge=0, description="Decimal places.")
    CURRENCY_STRIP_ZERO_DECIMAL: bool = Field(
        True, description="Drop an all-zero decimal part from currency strings."
    )
    ELLIPSIS: str = Field("…", description="Suffix appended by truncate.")
    MASK_CHAR: str = Field("*", min_length=1, max_length=1)
    LIGHT_LUMINANCE_THRESHOLD: float = Field(0.179, ge=0.0, le=1.0)

    @classmethod
    def load(cls) -> "Settings":
        overrides: Dict[str, Any] = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name}")
            if raw is not None:
                overrides[name] = raw

        return cls(**overrides)


settings = Settings.load()
