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

from .assertions import abort_on_error, assert_or_abort, exit_with_error, format_error_banner
from .exceptions import (
    CompactQError,
    ErrorCode,
    InvalidQubitError,
    InvalidStateError,
    InvalidUnitaryError,
    ReportFileError,
    error_for,
)
from .rotations import X_AXIS, Y_AXIS, Z_AXIS, derive_conjugate_rotation_params, derive_rotation_params
from .types import ComplexScalar, CompactUnitaryParams, RotationAxis, UnitaryMatrix2x2
from .validation import (
    ValidationResult,
    check,
    is_normalized_pair,
    is_unit_complex,
    is_unit_vector,
    is_unitary_matrix2x2,
)

__all__ = [
    "X_AXIS",
    "Y_AXIS",
    "Z_AXIS",
    "CompactQError",
    "CompactUnitaryParams",
    "ComplexScalar",
    "ErrorCode",
    "InvalidQubitError",
    "InvalidStateError",
    "InvalidUnitaryError",
    "ReportFileError",
    "RotationAxis",
    "UnitaryMatrix2x2",
    "ValidationResult",
    "abort_on_error",
    "assert_or_abort",
    "check",
    "derive_conjugate_rotation_params",
    "derive_rotation_params",
    "error_for",
    "exit_with_error",
    "format_error_banner",
    "is_normalized_pair",
    "is_unit_complex",
    "is_unit_vector",
    "is_unitary_matrix2x2",
]
