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

from compactq._logging import configure_logging
from compactq.backends import StateBackend, StateHandle
from compactq.core import (
    X_AXIS,
    Y_AXIS,
    Z_AXIS,
    CompactQError,
    CompactUnitaryParams,
    ComplexScalar,
    ErrorCode,
    RotationAxis,
    UnitaryMatrix2x2,
    ValidationResult,
    abort_on_error,
    assert_or_abort,
    derive_conjugate_rotation_params,
    derive_rotation_params,
    exit_with_error,
    is_normalized_pair,
    is_unit_complex,
    is_unit_vector,
    is_unitary_matrix2x2,
)
from compactq.gates import GateCatalog, ValidatedGates
from compactq.seeding import RandomContext, get_random_context

__all__ = [
    "X_AXIS",
    "Y_AXIS",
    "Z_AXIS",
    "CompactQError",
    "CompactUnitaryParams",
    "ComplexScalar",
    "ErrorCode",
    "GateCatalog",
    "RandomContext",
    "RotationAxis",
    "StateBackend",
    "StateHandle",
    "UnitaryMatrix2x2",
    "ValidatedGates",
    "ValidationResult",
    "abort_on_error",
    "assert_or_abort",
    "configure_logging",
    "derive_conjugate_rotation_params",
    "derive_rotation_params",
    "exit_with_error",
    "get_random_context",
    "is_normalized_pair",
    "is_unit_complex",
    "is_unit_vector",
    "is_unitary_matrix2x2",
]
