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

"""Loguru setup for CompactQ, driven by a YAML sink description."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from loguru import logger
from pydantic import BaseModel
from pydantic_settings import BaseSettings
from ruamel.yaml import YAML

from compactq.settings import get_settings

if TYPE_CHECKING:
    from types import FrameType

_STREAMS: dict[str, TextIO] = {"stderr": sys.stderr, "stdout": sys.stdout}


class SinkConfig(BaseModel):
    """
    Options forwarded to ``logger.add`` for one sink.
    """

    sink: str | Path
    level: str = "INFO"
    format: str | None = None
    colorize: bool = False
    enqueue: bool = False
    rotation: str | None = None
    serialize: bool = False
    only_compactq: bool = True


class InterceptLibraryConfig(BaseModel):
    name: str
    level: str = "ERROR"


class LoggingSettings(BaseSettings):
    """
    Loguru sinks and the stdlib loggers to quiet, as read from the logging YAML file.
    """

    sinks: list[SinkConfig] = []
    intercept_libraries: list[InterceptLibraryConfig] = []

    @classmethod
    def load(cls, path: str | Path) -> LoggingSettings:
        data = YAML(typ="safe").load(Path(path))
        return cls(**(data or {}))


def only_compactq(record: dict[str, Any]) -> bool:
    return record["name"].startswith("compactq") or record["extra"].get("component") is not None


class InterceptHandler(logging.Handler):
    """
    Redirect stdlib 'logging' records to Loguru.
    """

    def emit(self, record: logging.LogRecord) -> None:  # noqa: PLR6301
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno  # type: ignore[assignment]

        # Skip logging's own frames so the caller is reported.
        frame: FrameType | None = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def resolve_config_path(path: str | Path) -> Path:
    config_path = Path(path).expanduser()
    if not config_path.is_absolute():
        config_path = (Path.cwd() / config_path).resolve()
    return config_path


def configure_logging(path: str | Path | None = None) -> None:
    """
    Replace the Loguru sinks with the ones described in the logging YAML file and route stdlib logging into Loguru.

    Args:
        path (str | Path | None): Configuration file to load. Defaults to ``logging_config_path`` from the settings.
    """
    settings = LoggingSettings.load(resolve_config_path(path or get_settings().logging_config_path))

    logger.remove()

    for sink_conf in settings.sinks:
        params = sink_conf.model_dump()
        sink_target = params.pop("sink")
        if isinstance(sink_target, str):
            sink_target = _STREAMS.get(sink_target.lower(), sink_target)
        if params.pop("only_compactq"):
            params["filter"] = only_compactq

        logger.add(sink_target, **{key: value for key, value in params.items() if value is not None})

    for intercept_library in settings.intercept_libraries:
        logging.getLogger(intercept_library.name).setLevel(intercept_library.level)

    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(logging.NOTSET)
    for logger_name in list(logging.root.manager.loggerDict.keys()):
        logging.getLogger(logger_name).handlers = []
        logging.getLogger(logger_name).propagate = True
