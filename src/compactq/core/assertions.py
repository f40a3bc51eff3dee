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
"""
Process-terminating error reporting.

Library code reports failures with :class:`~compactq.core.validation.ValidationResult` or
:class:`~compactq.core.exceptions.CompactQError`. These helpers are for the entry point that owns the process and
wants a failure to end it, printing the diagnostic banner and exiting with the error code as status.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, NoReturn

from loguru import logger

from compactq.settings import get_settings

from .exceptions import CompactQError, ErrorCode

if TYPE_CHECKING:
    from collections.abc import Iterator


def format_error_banner(error_code: ErrorCode, operation: str) -> list[str]:
    return [
        "!!!",
        f"{get_settings().error_banner_prefix} Error in function {operation}: {error_code.message}",
        "!!!",
        "exiting..",
    ]


def exit_with_error(error_code: ErrorCode, operation: str) -> NoReturn:
    """
    Print the error banner and terminate the process with ``error_code`` as exit status.

    Args:
        error_code (ErrorCode): The failure to report.
        operation (str): Name of the operation that detected the failure.

    Raises:
        ValueError: If asked to exit with ``ErrorCode.SUCCESS``.
        SystemExit: Always, otherwise.
    """
    if error_code is ErrorCode.SUCCESS:
        raise ValueError("Cannot exit with an error using ErrorCode.SUCCESS.")
    logger.error("{} failed with error {}: {}", operation, int(error_code), error_code.message)
    print("\n".join(format_error_banner(error_code, operation)), flush=True)  # noqa: T201
    raise SystemExit(int(error_code))


def assert_or_abort(condition: bool, error_code: ErrorCode, operation: str) -> None:
    if not condition:
        exit_with_error(error_code, operation)


@contextmanager
def abort_on_error() -> Iterator[None]:
    """
    Turn a :class:`CompactQError` raised inside the block into :func:`exit_with_error`.

    Example:
        .. code-block:: python

            with abort_on_error():
                gates.rotate_around_axis(state, 0, angle, axis)
    """
    try:
        yield
    except CompactQError as error:
        exit_with_error(error.error_code, error.operation)
