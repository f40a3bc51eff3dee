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

import numpy as np
import pytest

from compactq.backends.backend import StateBackend, StateHandle
from compactq.settings import get_settings


class FakeBackend(StateBackend):
    """Dense state vector in memory; qubit ``q`` is bit ``q`` of the amplitude index."""

    def __init__(self, amplitudes):
        self.amplitudes = np.asarray(amplitudes, dtype=complex).copy()

    def _apply(self, target_qubit, matrix, control_qubit=None):
        indices = np.arange(len(self.amplitudes))
        zero = indices[((indices >> target_qubit) & 1) == 0]
        if control_qubit is not None:
            zero = zero[((zero >> control_qubit) & 1) == 1]
        one = zero | (1 << target_qubit)
        a0 = self.amplitudes[zero].copy()
        a1 = self.amplitudes[one].copy()
        self.amplitudes[zero] = matrix[0, 0] * a0 + matrix[0, 1] * a1
        self.amplitudes[one] = matrix[1, 0] * a0 + matrix[1, 1] * a1

    def apply_phase_term(self, state, target_qubit, term):
        self._apply(target_qubit, np.diag([1, term.to_complex()]))

    def apply_compact_unitary(self, state, target_qubit, params):
        self._apply(target_qubit, params.to_matrix())

    def apply_controlled_compact_unitary(self, state, control_qubit, target_qubit, params):
        self._apply(target_qubit, params.to_matrix(), control_qubit=control_qubit)

    def apply_unitary(self, state, target_qubit, matrix):
        self._apply(target_qubit, matrix.to_array())

    def get_real_amp(self, state, index):
        return float(self.amplitudes[index].real)

    def get_imag_amp(self, state, index):
        return float(self.amplitudes[index].imag)


@pytest.fixture
def make_backend():
    """Build a FakeBackend from an amplitude list, or from a qubit count (starting in |0...0>)."""

    def factory(amplitudes_or_num_qubits):
        if isinstance(amplitudes_or_num_qubits, int):
            amplitudes = np.zeros(1 << amplitudes_or_num_qubits, dtype=complex)
            amplitudes[0] = 1
            return FakeBackend(amplitudes)
        return FakeBackend(amplitudes_or_num_qubits)

    return factory


@pytest.fixture
def one_qubit():
    return StateHandle(num_qubits=1)


@pytest.fixture
def two_qubits():
    return StateHandle(num_qubits=2)


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

