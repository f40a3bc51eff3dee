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
Geometric checks on gate parameters.

The ``is_*`` predicates only answer whether a value is legal. A value passes when its deviation is strictly below
the configured tolerance, so NaN never passes. The ``check_*`` functions turn a predicate into a
:class:`ValidationResult` naming the failure and the operation that asked.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from loguru import logger

from compactq.settings import get_tolerance

from .exceptions import ErrorCode, error_for
from .types import ComplexScalar, CompactUnitaryParams, RotationAxis, UnitaryMatrix2x2

MAX_PRINTABLE_QUBITS = 5


def _is_close(value: float, expected: float) -> bool:
    return abs(value - expected) < get_tolerance()


def is_unit_complex(value: ComplexScalar) -> bool:
    return _is_close(math.sqrt(value.real**2 + value.imag**2), 1.0)


def is_normalized_pair(alpha: ComplexScalar, beta: ComplexScalar) -> bool:
    return _is_close(alpha.real**2 + alpha.imag**2 + beta.real**2 + beta.imag**2, 1.0)


def is_unit_vector(x: float, y: float, z: float) -> bool:
    return _is_close(math.sqrt(x**2 + y**2 + z**2), 1.0)


def is_unitary_matrix2x2(matrix: UnitaryMatrix2x2) -> bool:
    """
    Check that both columns of the matrix are normalized and mutually orthogonal.

    Args:
        matrix (UnitaryMatrix2x2): The candidate gate.

    Returns:
        bool: True if the matrix is unitary within the tolerance.
    """
    first = (matrix.r0c0.to_complex(), matrix.r1c0.to_complex())
    second = (matrix.r0c1.to_complex(), matrix.r1c1.to_complex())
    inner = first[0].conjugate() * second[0] + first[1].conjugate() * second[1]
    return (
        _is_close(abs(first[0]) ** 2 + abs(first[1]) ** 2, 1.0)
        and _is_close(abs(second[0]) ** 2 + abs(second[1]) ** 2, 1.0)
        and _is_close(inner.real, 0.0)
        and _is_close(inner.imag, 0.0)
    )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation step. Falsy when the check failed."""

    error_code: ErrorCode = ErrorCode.SUCCESS
    operation: str = ""

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, error_code: ErrorCode, operation: str) -> ValidationResult:
        if error_code is ErrorCode.SUCCESS:
            raise ValueError("A failed validation needs an error code other than SUCCESS.")
        return cls(error_code=error_code, operation=operation)

    @property
    def ok(self) -> bool:
        return self.error_code is ErrorCode.SUCCESS

    def __bool__(self) -> bool:
        return self.ok

    def then(self, next_check: ValidationResult) -> ValidationResult:
        """Keep the first failure of a chain of checks."""
        return self if not self.ok else next_check

    def raise_for_failure(self) -> None:
        """
        Raises:
            CompactQError: The subclass matching the error code, when the check failed.
        """
        if not self.ok:
            logger.debug("{} rejected its input: {}", self.operation, self.error_code.message)
            raise error_for(self.error_code, self.operation)


def check(condition: bool, error_code: ErrorCode, operation: str) -> ValidationResult:
    if condition:
        return ValidationResult.success()
    return ValidationResult.failure(error_code, operation)


def check_target_qubit(target_qubit: int, num_qubits: int, operation: str) -> ValidationResult:
    return check(0 <= target_qubit < num_qubits, ErrorCode.INVALID_TARGET_QUBIT, operation)


def check_control_qubit(control_qubit: int, num_qubits: int, operation: str) -> ValidationResult:
    return check(0 <= control_qubit < num_qubits, ErrorCode.INVALID_CONTROL_QUBIT, operation)


def check_control_target_distinct(control_qubit: int, target_qubit: int, operation: str) -> ValidationResult:
    return check(control_qubit != target_qubit, ErrorCode.CONTROL_EQUALS_TARGET, operation)


def check_unitary_matrix(matrix: UnitaryMatrix2x2, operation: str) -> ValidationResult:
    return check(is_unitary_matrix2x2(matrix), ErrorCode.INVALID_UNITARY_MATRIX, operation)


def check_alpha_beta(params: CompactUnitaryParams, operation: str) -> ValidationResult:
    return check(is_normalized_pair(params.alpha, params.beta), ErrorCode.INVALID_ROTATION_ARGUMENTS, operation)


def check_unit_vector(axis: RotationAxis, operation: str) -> ValidationResult:
    return check(is_unit_vector(axis.x, axis.y, axis.z), ErrorCode.INVALID_ROTATION_ARGUMENTS, operation)


def check_phase_term(term: ComplexScalar, operation: str) -> ValidationResult:
    return check(is_unit_complex(term), ErrorCode.NON_UNITARY_PHASE_SHIFT, operation)


def check_num_qubits(num_qubits: int, operation: str) -> ValidationResult:
    return check(num_qubits > 0, ErrorCode.INVALID_NUM_QUBITS, operation)


def check_printable_size(num_qubits: int, operation: str) -> ValidationResult:
    return check(num_qubits <= MAX_PRINTABLE_QUBITS, ErrorCode.SYSTEM_TOO_LARGE_TO_PRINT, operation)
