"""Runtime settings for floatguard."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Runtime(str, Enum):
    """
    Режим рантайма.

    STANDARD и MINIMAL дают идентичные результаты вычислений. MINIMAL
    предназначен для окружений без полноценного рантайма: путь валидации
    не обращается к logging вообще.
    """

    STANDARD = "std"
    MINIMAL = "minimal"


class FloatGuardSettings(BaseSettings):
    """
    Настройки floatguard.

    Загружаются из переменных окружения (префикс FLOATGUARD_) или задаются
    напрямую.

    Example:
        >>> settings = FloatGuardSettings(runtime="minimal")
        >>> settings.runtime is Runtime.MINIMAL
        True
    """

    runtime: Runtime = Field(
        default=Runtime.STANDARD,
        description="Runtime mode (std | minimal); results are identical in both",
    )
    log_validation_failures: bool = Field(
        default=True,
        description="Log rejected values at DEBUG on the validation boundary",
    )

    model_config = SettingsConfigDict(
        env_prefix="FLOATGUARD_",
        extra="ignore",
        frozen=True,
    )

    @property
    def logging_enabled(self) -> bool:
        return self.runtime is Runtime.STANDARD and self.log_validation_failures


@lru_cache(maxsize=1)
def get_settings() -> FloatGuardSettings:
    """Глобальные настройки (читаются из окружения один раз)."""
    return FloatGuardSettings()


def reset_settings() -> None:
    """Сбросить кэш настроек (для тестов и смены окружения)."""
    get_settings.cache_clear()
