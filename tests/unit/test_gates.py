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

import math
from unittest.mock import MagicMock, call

import numpy as np
import pytest

from compactq.backends.backend import StateBackend, StateHandle
from compactq.core.exceptions import ErrorCode, InvalidQubitError, InvalidUnitaryError
from compactq.core.rotations import X_AXIS, Z_AXIS, derive_rotation_params
from compactq.core.types import ComplexScalar, CompactUnitaryParams, RotationAxis, UnitaryMatrix2x2
from compactq.core.validation import is_unit_complex
from compactq.gates import (
    PAULI_Z_TERM,
    S_DAGGER_TERM,
    S_TERM,
    T_DAGGER_TERM,
    T_TERM,
    GateCatalog,
    ValidatedGates,
    phase_shift_term,
    shift_indices,
)

PLUS = np.array([1, 1]) / np.sqrt(2)


def test_fixed_phase_terms():
    assert S_TERM == ComplexScalar(0.0, 1.0)
    assert PAULI_Z_TERM == ComplexScalar(-1.0, 0.0)
    assert S_DAGGER_TERM == S_TERM.conjugate()
    assert T_DAGGER_TERM == T_TERM.conjugate()
    assert complex(T_TERM) == pytest.approx(np.exp(1j * np.pi / 4))
    for term in (S_TERM, PAULI_Z_TERM, T_TERM, S_DAGGER_TERM, T_DAGGER_TERM, phase_shift_term(0.3)):
        assert is_unit_complex(term)


def test_phase_shift_term():
    term = phase_shift_term(math.pi / 3)
    assert (term.real, term.imag) == pytest.approx((0.5, math.sqrt(3) / 2))


def test_shift_indices():
    assert shift_indices([0, 2], 3) == [3, 5]


@pytest.mark.parametrize(
    ("gate", "expected"),
    [
        ("pauli_z", [1, -1]),
        ("s_gate", [1, 1j]),
        ("s_gate_conj", [1, -1j]),
        ("t_gate", [1, np.exp(1j * np.pi / 4)]),
        ("t_gate_conj", [1, np.exp(-1j * np.pi / 4)]),
    ],
)
def test_phase_gates(make_backend, one_qubit, gate, expected):
    backend = make_backend(PLUS)
    getattr(GateCatalog(backend), gate)(one_qubit, 0)
    np.testing.assert_allclose(backend.amplitudes, np.array(expected) / np.sqrt(2), atol=1e-12)


def test_phase_shift(make_backend, one_qubit):
    backend = make_backend(PLUS)
    GateCatalog(backend).phase_shift(one_qubit, 0, math.pi / 2)
    np.testing.assert_allclose(backend.amplitudes, np.array([1, 1j]) / np.sqrt(2), atol=1e-12)


def test_rotate_x_by_pi_flips_qubit(make_backend, one_qubit):
    backend = make_backend(1)
    GateCatalog(backend).rotate_x(one_qubit, 0, math.pi)
    np.testing.assert_allclose(backend.amplitudes, [0, -1j], atol=1e-12)


def test_rotate_y_by_half_pi_makes_plus(make_backend, one_qubit):
    backend = make_backend(1)
    GateCatalog(backend).rotate_y(one_qubit, 0, math.pi / 2)
    np.testing.assert_allclose(backend.amplitudes, PLUS, atol=1e-12)


def test_rotate_z_matches_phase_up_to_global_phase(make_backend, one_qubit):
    backend = make_backend(PLUS)
    GateCatalog(backend).rotate_z(one_qubit, 0, math.pi)
    np.testing.assert_allclose(backend.amplitudes, -1j * np.array([1, -1]) / np.sqrt(2), atol=1e-12)


def test_rotation_followed_by_conjugate_rotation_about_z_is_identity(make_backend, one_qubit):
    backend = make_backend(PLUS)
    catalog = GateCatalog(backend)
    catalog.rotate_around_axis(one_qubit, 0, 0.8, Z_AXIS)
    catalog.rotate_around_axis_conj(one_qubit, 0, 0.8, Z_AXIS)
    np.testing.assert_allclose(backend.amplitudes, PLUS, atol=1e-12)


def test_controlled_rotate_x_acts_only_when_control_is_set(make_backend, two_qubits):
    backend = make_backend(2)
    catalog = GateCatalog(backend)
    catalog.controlled_rotate_x(two_qubits, 0, 1, math.pi)
    np.testing.assert_allclose(backend.amplitudes, [1, 0, 0, 0], atol=1e-12)

    backend.amplitudes = np.array([0, 1, 0, 0], dtype=complex)  # control qubit 0 set
    catalog.controlled_rotate_x(two_qubits, 0, 1, math.pi)
    np.testing.assert_allclose(backend.amplitudes, [0, 0, 0, -1j], atol=1e-12)


def test_controlled_rotations_forward_derived_params(two_qubits):
    backend = MagicMock(spec=StateBackend)
    catalog = GateCatalog(backend)
    catalog.controlled_rotate_y(two_qubits, 1, 0, 0.5)
    catalog.controlled_rotate_z(two_qubits, 1, 0, 0.5)
    catalog.controlled_rotate_around_axis_conj(two_qubits, 1, 0, 0.5, X_AXIS)

    params = backend.apply_controlled_compact_unitary.call_args_list
    assert params[0] == call(two_qubits, 1, 0, derive_rotation_params(0.5, RotationAxis(0.0, 1.0, 0.0)))
    assert params[1] == call(two_qubits, 1, 0, derive_rotation_params(0.5, Z_AXIS))
    assert params[2] == call(two_qubits, 1, 0, derive_rotation_params(0.5, X_AXIS).conjugate())


def test_density_matrix_gets_conjugate_pass():
    backend = MagicMock(spec=StateBackend)
    rho = StateHandle(num_qubits=2, is_density_matrix=True)
    catalog = GateCatalog(backend)

    catalog.s_gate(rho, 1)
    catalog.rotate_x(rho, 0, 0.3)
    catalog.controlled_rotate_z(rho, 0, 1, 0.3)

    backend.apply_phase_term.assert_has_calls([call(rho, 1, S_TERM), call(rho, 3, S_DAGGER_TERM)])
    params = derive_rotation_params(0.3, X_AXIS)
    backend.apply_compact_unitary.assert_has_calls([call(rho, 0, params), call(rho, 2, params.conjugate())])
    params = derive_rotation_params(0.3, Z_AXIS)
    backend.apply_controlled_compact_unitary.assert_has_calls(
        [call(rho, 0, 1, params), call(rho, 2, 3, params.conjugate())]
    )


def test_density_matrix_evolution(make_backend):
    # |0><0| rotated by RY(pi/2) becomes |+><+|; qubit 0 indexes rows, qubit 1 indexes columns.
    rho = StateHandle(num_qubits=1, is_density_matrix=True)
    backend = make_backend([1, 0, 0, 0])
    GateCatalog(backend).rotate_y(rho, 0, math.pi / 2)
    np.testing.assert_allclose(backend.amplitudes, [0.5, 0.5, 0.5, 0.5], atol=1e-12)


def test_density_matrix_unitary_uses_conjugate_matrix(make_backend):
    # Amplitude index is row + 2 * column, so the flat state is rho in column-major order.
    u = np.array([[1, 1j], [1j, 1]]) / np.sqrt(2)
    rho = np.array([[1, 0], [0, 0]], dtype=complex)
    backend = make_backend(rho.flatten(order="F"))

    GateCatalog(backend).apply_unitary(
        StateHandle(num_qubits=1, is_density_matrix=True), 0, UnitaryMatrix2x2.from_array(u)
    )

    expected = u @ rho @ u.conj().T
    np.testing.assert_allclose(backend.amplitudes, expected.flatten(order="F"), atol=1e-12)


def test_pure_state_gets_single_call(one_qubit):
    backend = MagicMock(spec=StateBackend)
    GateCatalog(backend).t_gate(one_qubit, 0)
    backend.apply_phase_term.assert_called_once_with(one_qubit, 0, T_TERM)


# --- Validated operations ---


def test_validated_rotation_applies_gate(make_backend, one_qubit):
    backend = make_backend(1)
    ValidatedGates(backend).rotate_around_axis(one_qubit, 0, math.pi, X_AXIS)
    np.testing.assert_allclose(backend.amplitudes, [0, -1j], atol=1e-12)


def test_validated_rotation_rejects_non_unit_axis(one_qubit):
    backend = MagicMock(spec=StateBackend)
    with pytest.raises(InvalidUnitaryError) as exc_info:
        ValidatedGates(backend).rotate_around_axis(one_qubit, 0, 1.0, RotationAxis(1.0, 1.0, 0.0))
    assert exc_info.value.error_code is ErrorCode.INVALID_ROTATION_ARGUMENTS
    assert exc_info.value.operation == "rotate_around_axis"
    backend.apply_compact_unitary.assert_not_called()


@pytest.mark.parametrize(
    ("control", "target", "code"),
    [
        (0, 2, ErrorCode.INVALID_TARGET_QUBIT),
        (-1, 0, ErrorCode.INVALID_CONTROL_QUBIT),
        (1, 1, ErrorCode.CONTROL_EQUALS_TARGET),
    ],
)
def test_validated_controlled_rotation_checks_qubits(two_qubits, control, target, code):
    backend = MagicMock(spec=StateBackend)
    with pytest.raises(InvalidQubitError) as exc_info:
        ValidatedGates(backend).controlled_rotate_around_axis(two_qubits, control, target, 1.0, Z_AXIS)
    assert exc_info.value.error_code is code
    backend.apply_controlled_compact_unitary.assert_not_called()


def test_validated_compact_unitary(make_backend, one_qubit):
    backend = make_backend(1)
    gates = ValidatedGates(backend)
    gates.compact_unitary(one_qubit, 0, CompactUnitaryParams(ComplexScalar(0.6, 0.0), ComplexScalar(0.0, 0.8)))
    np.testing.assert_allclose(backend.amplitudes, [0.6, 0.8j], atol=1e-12)

    with pytest.raises(InvalidUnitaryError):
        gates.compact_unitary(one_qubit, 0, CompactUnitaryParams(ComplexScalar(1.0, 0.0), ComplexScalar(0.1, 0.0)))


def test_validated_controlled_compact_unitary(two_qubits):
    backend = MagicMock(spec=StateBackend)
    params = derive_rotation_params(0.2, X_AXIS)
    ValidatedGates(backend).controlled_compact_unitary(two_qubits, 0, 1, params)
    backend.apply_controlled_compact_unitary.assert_called_once_with(two_qubits, 0, 1, params)


def test_validated_controlled_compact_unitary_rejects_unnormalized_pair(two_qubits):
    backend = MagicMock(spec=StateBackend)
    params = CompactUnitaryParams(ComplexScalar(0.9, 0.0), ComplexScalar(0.0, 0.9))
    with pytest.raises(InvalidUnitaryError) as exc_info:
        ValidatedGates(backend).controlled_compact_unitary(two_qubits, 0, 1, params)
    assert exc_info.value.error_code is ErrorCode.INVALID_ROTATION_ARGUMENTS
    assert exc_info.value.operation == "controlled_compact_unitary"
    backend.apply_controlled_compact_unitary.assert_not_called()


def test_validated_unitary(make_backend, one_qubit):
    backend = make_backend(1)
    gates = ValidatedGates(backend)
    gates.unitary(one_qubit, 0, UnitaryMatrix2x2.from_array(np.array([[1, 1], [1, -1]]) / np.sqrt(2)))
    np.testing.assert_allclose(backend.amplitudes, PLUS, atol=1e-12)

    with pytest.raises(InvalidUnitaryError) as exc_info:
        gates.unitary(one_qubit, 0, UnitaryMatrix2x2.from_array([[2, 0], [0, 1]]))
    assert exc_info.value.error_code is ErrorCode.INVALID_UNITARY_MATRIX


def test_unitary_needs_backend_support(one_qubit):
    class PhaseOnlyBackend(StateBackend):
        def apply_phase_term(self, state, target_qubit, term): ...
        def apply_compact_unitary(self, state, target_qubit, params): ...
        def apply_controlled_compact_unitary(self, state, control_qubit, target_qubit, params): ...
        def get_real_amp(self, state, index): return 0.0
        def get_imag_amp(self, state, index): return 0.0

    with pytest.raises(NotImplementedError, match="PhaseOnlyBackend has no general unitary"):
        ValidatedGates(PhaseOnlyBackend()).unitary(one_qubit, 0, UnitaryMatrix2x2.from_array(np.eye(2)))


def test_validated_phase_shift_by_term(make_backend, one_qubit):
    backend = make_backend(PLUS)
    gates = ValidatedGates(backend)
    gates.phase_shift_by_term(one_qubit, 0, S_TERM)
    np.testing.assert_allclose(backend.amplitudes, np.array([1, 1j]) / np.sqrt(2), atol=1e-12)

    with pytest.raises(InvalidUnitaryError) as exc_info:
        gates.phase_shift_by_term(one_qubit, 0, ComplexScalar(0.5, 0.5))
    assert exc_info.value.error_code is ErrorCode.NON_UNITARY_PHASE_SHIFT
