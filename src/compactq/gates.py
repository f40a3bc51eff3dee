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
Named single-qubit gates expressed through the backend primitives.

:class:`GateCatalog` only builds parameters and forwards them. :class:`ValidatedGates` checks its inputs first and
raises :class:`~compactq.core.exceptions.CompactQError` when they are illegal, before the backend is touched.

On a density matrix :math:`\\rho` of ``n`` qubits, an operation :math:`U` on qubit ``q`` is applied as :math:`U`
on ``q`` followed by :math:`U^*` on ``q + n``, which realizes :math:`U \\rho U^\\dagger`.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from compactq.core.rotations import X_AXIS, Y_AXIS, Z_AXIS, derive_conjugate_rotation_params, derive_rotation_params
from compactq.core.types import ComplexScalar
from compactq.core.validation import (
    check_alpha_beta,
    check_control_qubit,
    check_control_target_distinct,
    check_phase_term,
    check_target_qubit,
    check_unit_vector,
    check_unitary_matrix,
)

if TYPE_CHECKING:
    from compactq.backends.backend import StateBackend, StateHandle
    from compactq.core.types import CompactUnitaryParams, RotationAxis, UnitaryMatrix2x2
    from compactq.core.validation import ValidationResult

PAULI_Z_TERM = ComplexScalar(-1.0, 0.0)
S_TERM = ComplexScalar(0.0, 1.0)
T_TERM = ComplexScalar(1 / math.sqrt(2), 1 / math.sqrt(2))
S_DAGGER_TERM = ComplexScalar(0.0, -1.0)
T_DAGGER_TERM = ComplexScalar(1 / math.sqrt(2), -1 / math.sqrt(2))


def phase_shift_term(angle: float) -> ComplexScalar:
    return ComplexScalar(math.cos(angle), math.sin(angle))


def shift_indices(indices: list[int], shift: int) -> list[int]:
    return [index + shift for index in indices]


class GateCatalog:
    """
    Gates built from the backend's phase-term and compact-unitary primitives, without any validation.

    Args:
        backend (StateBackend): The engine owning the amplitudes.
    """

    def __init__(self, backend: StateBackend) -> None:
        self.backend = backend

    # Primitives, with the density-matrix conjugate pass.

    def apply_phase_term(self, state: StateHandle, target_qubit: int, term: ComplexScalar) -> None:
        self.backend.apply_phase_term(state, target_qubit, term)
        if state.is_density_matrix:
            (shifted,) = shift_indices([target_qubit], state.num_qubits)
            self.backend.apply_phase_term(state, shifted, term.conjugate())

    def apply_compact_unitary(self, state: StateHandle, target_qubit: int, params: CompactUnitaryParams) -> None:
        self.backend.apply_compact_unitary(state, target_qubit, params)
        if state.is_density_matrix:
            (shifted,) = shift_indices([target_qubit], state.num_qubits)
            self.backend.apply_compact_unitary(state, shifted, params.conjugate())

    def apply_controlled_compact_unitary(
        self, state: StateHandle, control_qubit: int, target_qubit: int, params: CompactUnitaryParams
    ) -> None:
        self.backend.apply_controlled_compact_unitary(state, control_qubit, target_qubit, params)
        if state.is_density_matrix:
            control, target = shift_indices([control_qubit, target_qubit], state.num_qubits)
            self.backend.apply_controlled_compact_unitary(state, control, target, params.conjugate())

    def apply_unitary(self, state: StateHandle, target_qubit: int, matrix: UnitaryMatrix2x2) -> None:
        self.backend.apply_unitary(state, target_qubit, matrix)
        if state.is_density_matrix:
            (shifted,) = shift_indices([target_qubit], state.num_qubits)
            self.backend.apply_unitary(state, shifted, matrix.conjugate())

    # Phase gates

    def phase_shift(self, state: StateHandle, target_qubit: int, angle: float) -> None:
        self.apply_phase_term(state, target_qubit, phase_shift_term(angle))

    def pauli_z(self, state: StateHandle, target_qubit: int) -> None:
        self.apply_phase_term(state, target_qubit, PAULI_Z_TERM)

    def s_gate(self, state: StateHandle, target_qubit: int) -> None:
        self.apply_phase_term(state, target_qubit, S_TERM)

    def t_gate(self, state: StateHandle, target_qubit: int) -> None:
        self.apply_phase_term(state, target_qubit, T_TERM)

    def s_gate_conj(self, state: StateHandle, target_qubit: int) -> None:
        self.apply_phase_term(state, target_qubit, S_DAGGER_TERM)

    def t_gate_conj(self, state: StateHandle, target_qubit: int) -> None:
        self.apply_phase_term(state, target_qubit, T_DAGGER_TERM)

    # Rotations

    def rotate_around_axis(self, state: StateHandle, target_qubit: int, angle: float, axis: RotationAxis) -> None:
        self.apply_compact_unitary(state, target_qubit, derive_rotation_params(angle, axis))

    def rotate_around_axis_conj(
        self, state: StateHandle, target_qubit: int, angle: float, axis: RotationAxis
    ) -> None:
        self.apply_compact_unitary(state, target_qubit, derive_conjugate_rotation_params(angle, axis))

    def rotate_x(self, state: StateHandle, target_qubit: int, angle: float) -> None:
        self.rotate_around_axis(state, target_qubit, angle, X_AXIS)

    def rotate_y(self, state: StateHandle, target_qubit: int, angle: float) -> None:
        self.rotate_around_axis(state, target_qubit, angle, Y_AXIS)

    def rotate_z(self, state: StateHandle, target_qubit: int, angle: float) -> None:
        self.rotate_around_axis(state, target_qubit, angle, Z_AXIS)

    def controlled_rotate_around_axis(
        self, state: StateHandle, control_qubit: int, target_qubit: int, angle: float, axis: RotationAxis
    ) -> None:
        self.apply_controlled_compact_unitary(
            state, control_qubit, target_qubit, derive_rotation_params(angle, axis)
        )

    def controlled_rotate_around_axis_conj(
        self, state: StateHandle, control_qubit: int, target_qubit: int, angle: float, axis: RotationAxis
    ) -> None:
        self.apply_controlled_compact_unitary(
            state, control_qubit, target_qubit, derive_conjugate_rotation_params(angle, axis)
        )

    def controlled_rotate_x(self, state: StateHandle, control_qubit: int, target_qubit: int, angle: float) -> None:
        self.controlled_rotate_around_axis(state, control_qubit, target_qubit, angle, X_AXIS)

    def controlled_rotate_y(self, state: StateHandle, control_qubit: int, target_qubit: int, angle: float) -> None:
        self.controlled_rotate_around_axis(state, control_qubit, target_qubit, angle, Y_AXIS)

    def controlled_rotate_z(self, state: StateHandle, control_qubit: int, target_qubit: int, angle: float) -> None:
        self.controlled_rotate_around_axis(state, control_qubit, target_qubit, angle, Z_AXIS)


class ValidatedGates:
    """
    Public gate operations. Every input is checked before the backend sees it.

    Raises:
        InvalidQubitError: For out-of-range or coinciding qubits.
        InvalidUnitaryError: For non-unitary matrices, unnormalized (alpha, beta) pairs, non-unit rotation axes and
            non-unit phase terms.
    """

    def __init__(self, backend: StateBackend) -> None:
        self.catalog = GateCatalog(backend)

    def compact_unitary(self, state: StateHandle, target_qubit: int, params: CompactUnitaryParams) -> None:
        operation = "compact_unitary"
        check_target_qubit(target_qubit, state.num_qubits, operation).then(
            check_alpha_beta(params, operation)
        ).raise_for_failure()
        self.catalog.apply_compact_unitary(state, target_qubit, params)

    def unitary(self, state: StateHandle, target_qubit: int, matrix: UnitaryMatrix2x2) -> None:
        operation = "unitary"
        check_target_qubit(target_qubit, state.num_qubits, operation).then(
            check_unitary_matrix(matrix, operation)
        ).raise_for_failure()
        self.catalog.apply_unitary(state, target_qubit, matrix)

    def controlled_compact_unitary(
        self, state: StateHandle, control_qubit: int, target_qubit: int, params: CompactUnitaryParams
    ) -> None:
        operation = "controlled_compact_unitary"
        self._check_controlled(state, control_qubit, target_qubit, operation).then(
            check_alpha_beta(params, operation)
        ).raise_for_failure()
        self.catalog.apply_controlled_compact_unitary(state, control_qubit, target_qubit, params)

    def rotate_around_axis(self, state: StateHandle, target_qubit: int, angle: float, axis: RotationAxis) -> None:
        operation = "rotate_around_axis"
        check_target_qubit(target_qubit, state.num_qubits, operation).then(
            check_unit_vector(axis, operation)
        ).raise_for_failure()
        self.catalog.rotate_around_axis(state, target_qubit, angle, axis)

    def controlled_rotate_around_axis(
        self, state: StateHandle, control_qubit: int, target_qubit: int, angle: float, axis: RotationAxis
    ) -> None:
        operation = "controlled_rotate_around_axis"
        self._check_controlled(state, control_qubit, target_qubit, operation).then(
            check_unit_vector(axis, operation)
        ).raise_for_failure()
        self.catalog.controlled_rotate_around_axis(state, control_qubit, target_qubit, angle, axis)

    def phase_shift_by_term(self, state: StateHandle, target_qubit: int, term: ComplexScalar) -> None:
        operation = "phase_shift_by_term"
        check_target_qubit(target_qubit, state.num_qubits, operation).then(
            check_phase_term(term, operation)
        ).raise_for_failure()
        self.catalog.apply_phase_term(state, target_qubit, term)

    @staticmethod
    def _check_controlled(
        state: StateHandle, control_qubit: int, target_qubit: int, operation: str
    ) -> ValidationResult:
        return (
            check_target_qubit(target_qubit, state.num_qubits, operation)
            .then(check_control_qubit(control_qubit, state.num_qubits, operation))
            .then(check_control_target_distinct(control_qubit, target_qubit, operation))
        )
