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
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from compactq.core.exceptions import ErrorCode, ReportFileError
from compactq.core.validation import check_printable_size
from compactq.settings import get_settings

if TYPE_CHECKING:
    from compactq.backends.backend import StateBackend, StateHandle

REPORT_HEADER = "real, imag"


def get_num_qubits(state: StateHandle) -> int:
    return state.num_qubits


def get_num_amps(state: StateHandle) -> int:
    return state.num_amps_per_chunk * state.num_chunks


def get_prob_amp(backend: StateBackend, state: StateHandle, index: int) -> float:
    """
    Probability of the basis state at local flat ``index``.

    Returns:
        float: The squared modulus of the amplitude.
    """
    real = backend.get_real_amp(state, index)
    imag = backend.get_imag_amp(state, index)
    return real * real + imag * imag


def _format_amplitude(real: float, imag: float, precision: int) -> str:
    return f"{real:.{precision}f}, {imag:.{precision}f}"


def report_state(
    backend: StateBackend, state: StateHandle, directory: str | Path | None = None, precision: int = 12
) -> Path:
    """
    Write the local amplitudes of ``state`` to ``state_rank_<chunk_id>.csv``.

    Only partition 0 writes the ``real, imag`` header, so the files of all partitions concatenate into one table.

    Args:
        backend (StateBackend): The engine owning the amplitudes.
        state (StateHandle): The register to report.
        directory (str | Path | None): Output directory. Defaults to ``report_directory`` from the settings.
        precision (int): Decimal places per component.

    Raises:
        ReportFileError: If the file cannot be opened for writing.

    Returns:
        Path: The written file.
    """
    path = Path(directory if directory is not None else get_settings().report_directory) / (
        f"state_rank_{state.chunk_id}.csv"
    )
    try:
        handle = path.open("w", encoding="utf-8")
    except OSError as error:
        logger.error("Could not open {} for writing: {}", path, error)
        raise ReportFileError(ErrorCode.FILE_OPEN_FAILURE, "report_state") from error

    with handle:
        if state.chunk_id == 0:
            handle.write(REPORT_HEADER + "\n")
        for index in range(state.num_amps_per_chunk):
            real = backend.get_real_amp(state, index)
            imag = backend.get_imag_amp(state, index)
            handle.write(_format_amplitude(real, imag, precision) + "\n")

    logger.debug("Wrote {} amplitudes to {}", state.num_amps_per_chunk, path)
    return path


def report_state_params(state: StateHandle) -> None:
    if state.chunk_id != 0:
        return
    num_amps = 1 << state.num_qubits
    print("QUBITS:")  # noqa: T201
    print(f"Number of qubits is {state.num_qubits}.")  # noqa: T201
    print(f"Number of amps is {num_amps}.")  # noqa: T201
    print(f"Number of amps per rank is {num_amps // state.num_chunks}.")  # noqa: T201


def report_state_to_screen(backend: StateBackend, state: StateHandle, precision: int = 12) -> None:
    """
    Print the local amplitudes of a small register, one ``real, imag`` pair per line.

    Raises:
        InvalidStateError: If the register has more than 5 qubits.
    """
    check_printable_size(state.num_qubits, "report_state_to_screen").raise_for_failure()
    print(f"Reporting state from rank {state.chunk_id} [")  # noqa: T201
    if state.chunk_id == 0:
        print(REPORT_HEADER)  # noqa: T201
    for index in range(state.num_amps_per_chunk):
        print(  # noqa: T201
            _format_amplitude(backend.get_real_amp(state, index), backend.get_imag_amp(state, index), precision)
        )
    print("]")  # noqa: T201
