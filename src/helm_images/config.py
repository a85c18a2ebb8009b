# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
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

"""
Configuration passed explicitly into every extraction run.
"""
import os
from typing import Dict, List, Optional
from dotenv import dotenv_values
from pydantic import BaseModel, Field, field_validator

from .EXTRACTORS.kinds import SUPPORTED_KINDS
from .UTILS.logging import LEVELS

ENV_PREFIX = "HELM_IMAGES_"


class ExtractionConfig(BaseModel):
    """
    Options for an extraction run.

    kinds: kinds to extract images from; documents of other kinds are skipped.
    image_keyword: substring (case-insensitive) marking an environment variable
        name or ConfigMap key as holding an image reference.
    skip_errors: log and skip documents that fail to extract instead of raising.
    log_level: level for the package logger.
    """
    kinds: List[str] = Field(default_factory=lambda: list(SUPPORTED_KINDS))
    image_keyword: str = "image"
    skip_errors: bool = False
    log_level: str = "warning"

    @field_validator("kinds")
    @classmethod
    def known_kinds(cls, kinds: List[str]) -> List[str]:
        unknown = [kind for kind in kinds if kind not in SUPPORTED_KINDS]
        if unknown:
            raise ValueError(
                f"unsupported kinds {unknown}, supported kinds are {', '.join(SUPPORTED_KINDS)}"
            )
        return kinds

    @field_validator("image_keyword")
    @classmethod
    def non_empty_keyword(cls, keyword: str) -> str:
        if not keyword:
            raise ValueError("image_keyword cannot be empty")
        return keyword

    @field_validator("log_level")
    @classmethod
    def known_level(cls, level: str) -> str:
        if level.lower() not in LEVELS:
            raise ValueError(f"unknown log level '{level}'")
        return level.lower()

    @classmethod
    def from_env(cls, env_file: Optional[str] = ".env", **overrides) -> "ExtractionConfig":
        """
        Builds a config from HELM_IMAGES_* variables, read from an optional
        .env file and then from the process environment (which wins).

        :param env_file: Path to a .env file, or None to skip it.
        :param overrides: Values that take precedence over the environment.
        :return: The resulting configuration.
        """
        values: Dict[str, Optional[str]] = {}
        if env_file and os.path.exists(env_file):
            values.update(dotenv_values(env_file))
        values.update(os.environ)

        settings = {}
        kinds = values.get(f"{ENV_PREFIX}KINDS")
        if kinds:
            settings["kinds"] = [k.strip() for k in kinds.split(",") if k.strip()]
        keyword = values.get(f"{ENV_PREFIX}IMAGE_KEYWORD")
        if keyword:
            settings["image_keyword"] = keyword
        skip_errors = values.get(f"{ENV_PREFIX}SKIP_ERRORS")
        if skip_errors:
            settings["skip_errors"] = skip_errors.lower() in ("1", "true", "yes", "on")
        log_level = values.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            settings["log_level"] = log_level

        settings.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**settings)
