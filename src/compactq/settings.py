# Copyright 2026 CompactQ Developers
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_logging_config_path() -> Path:
    return Path(__file__).with_name("logging_config.yaml").resolve()


class Precision(str, Enum):
    COMPLEX_64 = "COMPLEX_64"
    COMPLEX_128 = "COMPLEX_128"


# Largest deviation from an exact identity that validation still accepts at each precision.
PRECISION_TOLERANCE: dict[Precision, float] = {
    Precision.COMPLEX_64: 1e-5,
    Precision.COMPLEX_128: 1e-13,
}


class CompactQSettings(BaseSettings):
    """
    Environment-based configuration settings for CompactQ.

    These settings are automatically loaded from environment variables
    prefixed with `COMPACTQ_`, or from a local `.env` file if present.
    """

    model_config = SettingsConfigDict(env_prefix="compactq_", env_file=".env", env_file_encoding="utf-8")

    arithmetic_precision: Precision = Field(
        default=Precision.COMPLEX_128, description="[env: COMPACTQ_ARITHMETIC_PRECISION]"
    )
    tolerance: float | None = Field(
        default=None,
        gt=0,
        description="Overrides the tolerance derived from the arithmetic precision. [env: COMPACTQ_TOLERANCE]",
    )
    logging_config_path: Path = Field(
        default_factory=default_logging_config_path,
        description="YAML file used for logging configuration. [env: COMPACTQ_LOGGING_CONFIG_PATH]",
    )
    report_directory: Path = Field(
        default=Path(),
        description="Directory where state reports are written. [env: COMPACTQ_REPORT_DIRECTORY]",
    )
    error_banner_prefix: str = Field(
        default="CompactQ",
        min_length=1,
        description="Product name opening the fatal error banner line. [env: COMPACTQ_ERROR_BANNER_PREFIX]",
    )

    @property
    def effective_tolerance(self) -> float:
        if self.tolerance is not None:
            return self.tolerance
        return PRECISION_TOLERANCE[self.arithmetic_precision]


@lru_cache(maxsize=1)
def get_settings() -> CompactQSettings:
    """
    Returns a singleton instance of CompactQSettings.

    This function caches the parsed environment-based settings to avoid
    redundant re-parsing across the application lifecycle.

    Returns:
        CompactQSettings: The cached configuration object populated from environment variables.
    """
    return CompactQSettings()


def get_tolerance() -> float:
    """
    Returns the numerical tolerance shared by every geometric check.

    Returns:
        float: The override from the settings if present, otherwise the value for the configured precision.
    """
    return get_settings().effective_tolerance
