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

from enum import IntEnum


class ErrorCode(IntEnum):
    """
    Every failure CompactQ can report. The integer value doubles as the process exit status and the message is
    reproduced verbatim in diagnostics, so neither may change.
    """

    message: str

    def __new__(cls, value: int, message: str) -> ErrorCode:
        member = int.__new__(cls, value)
        member._value_ = value
        member.message = message
        return member

    SUCCESS = 0, "Success"
    INVALID_TARGET_QUBIT = 1, "Invalid target qubit. Note qubits are zero indexed."
    INVALID_CONTROL_QUBIT = 2, "Invalid control qubit. Note qubits are zero indexed."
    CONTROL_EQUALS_TARGET = 3, "Control qubit cannot equal target qubit."
    INVALID_NUM_CONTROL_QUBITS = 4, "Invalid number of control qubits"
    INVALID_UNITARY_MATRIX = 5, "Invalid unitary matrix."
    INVALID_ROTATION_ARGUMENTS = 6, "Invalid rotation arguments."
    SYSTEM_TOO_LARGE_TO_PRINT = 7, "Invalid system size. Cannot print output for systems greater than 5 qubits."
    ZERO_PROBABILITY_COLLAPSE = 8, "Can't collapse to state with zero probability."
    INVALID_NUM_QUBITS = 9, "Invalid number of qubits."
    INVALID_MEASUREMENT_OUTCOME = 10, "Invalid measurement outcome -- must be either 0 or 1."
    FILE_OPEN_FAILURE = 11, "Could not open file."
    EXPECTED_PURE_STATE = 12, "Second argument must be a pure state, not a density matrix."
    REGISTER_DIMENSION_MISMATCH = 13, "Dimensions of the qubit registers do not match."
    DENSITY_MATRIX_ONLY = 14, "This operation is only defined for density matrices."
    TWO_PURE_STATES_ONLY = 15, "This operation is only defined for two pure states."
    NON_UNITARY_PHASE_SHIFT = 16, "An non-unitary internal operation (phaseShift) occured."


class CompactQError(Exception):
    """Raised when an input fails validation. Carries the error code and the operation that detected it."""

    def __init__(self, error_code: ErrorCode, operation: str) -> None:
        if error_code is ErrorCode.SUCCESS:
            raise ValueError("ErrorCode.SUCCESS does not describe a failure.")
        self.error_code = error_code
        self.operation = operation
        super().__init__(f"{operation}: {error_code.message}")


class InvalidQubitError(CompactQError):
    """Raised when a target or control qubit index is out of range or repeated."""


class InvalidUnitaryError(CompactQError):
    """Raised when a matrix, an (alpha, beta) pair, a rotation or a phase term is not unitary."""


class InvalidStateError(CompactQError):
    """Raised when the state handle does not support the requested operation."""


class ReportFileError(CompactQError):
    """Raised when a state report cannot be written."""


_ERROR_TYPES: dict[ErrorCode, type[CompactQError]] = {
    ErrorCode.INVALID_TARGET_QUBIT: InvalidQubitError,
    ErrorCode.INVALID_CONTROL_QUBIT: InvalidQubitError,
    ErrorCode.CONTROL_EQUALS_TARGET: InvalidQubitError,
    ErrorCode.INVALID_NUM_CONTROL_QUBITS: InvalidQubitError,
    ErrorCode.INVALID_UNITARY_MATRIX: InvalidUnitaryError,
    ErrorCode.INVALID_ROTATION_ARGUMENTS: InvalidUnitaryError,
    ErrorCode.NON_UNITARY_PHASE_SHIFT: InvalidUnitaryError,
    ErrorCode.FILE_OPEN_FAILURE: ReportFileError,
}


def error_for(error_code: ErrorCode, operation: str) -> CompactQError:
    """
    Build the exception matching a failure code.

    Args:
        error_code (ErrorCode): The failure to report. Must not be ``ErrorCode.SUCCESS``.
        operation (str): Name of the operation that detected the failure.

    Returns:
        CompactQError: An instance of the most specific subclass for the code.
    """
    return _ERROR_TYPES.get(error_code, InvalidStateError)(error_code, operation)
