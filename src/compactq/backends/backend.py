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

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from compactq.core.validation import check_num_qubits

if TYPE_CHECKING:
    from compactq.core.types import ComplexScalar, CompactUnitaryParams, UnitaryMatrix2x2


@dataclass(frozen=True)
class StateHandle:
    """
    Read-only view of a register owned by a backend.

    Attributes:
        num_qubits (int): Number of qubits the register represents.
        num_chunks (int): Number of partitions the amplitudes are split into.
        chunk_id (int): Partition held by this process.
        is_density_matrix (bool): Whether the amplitudes store a density matrix, which takes ``2 * num_qubits``
            qubits of storage.
    """

    num_qubits: int
    num_chunks: int = 1
    chunk_id: int = 0
    is_density_matrix: bool = False

    def __post_init__(self) -> None:
        check_num_qubits(self.num_qubits, "StateHandle").raise_for_failure()
        if self.num_chunks < 1 or not 0 <= self.chunk_id < self.num_chunks:
            raise ValueError(f"Invalid partition {self.chunk_id} of {self.num_chunks}.")

    @property
    def num_qubits_in_state_vec(self) -> int:
        return 2 * self.num_qubits if self.is_density_matrix else self.num_qubits

    @property
    def num_amps_per_chunk(self) -> int:
        return (1 << self.num_qubits_in_state_vec) // self.num_chunks


class StateBackend(ABC):
    """
    The primitives a simulation engine exposes to CompactQ. Parameters reaching these methods have already been
    derived, and validated where the caller asked for it.
    """

    @abstractmethod
    def apply_phase_term(self, state: StateHandle, target_qubit: int, term: ComplexScalar) -> None:
        """Multiply the amplitudes where ``target_qubit`` is 1 by ``term``."""

    @abstractmethod
    def apply_compact_unitary(self, state: StateHandle, target_qubit: int, params: CompactUnitaryParams) -> None:
        """Apply the unitary ``[[alpha, -beta*], [beta, alpha*]]`` to ``target_qubit``."""

    @abstractmethod
    def apply_controlled_compact_unitary(
        self, state: StateHandle, control_qubit: int, target_qubit: int, params: CompactUnitaryParams
    ) -> None:
        """Apply the compact unitary to ``target_qubit`` where ``control_qubit`` is 1."""

    @abstractmethod
    def get_real_amp(self, state: StateHandle, index: int) -> float:
        """Real part of the amplitude at local flat ``index``."""

    @abstractmethod
    def get_imag_amp(self, state: StateHandle, index: int) -> float:
        """Imaginary part of the amplitude at local flat ``index``."""

    def apply_unitary(self, state: StateHandle, target_qubit: int, matrix: UnitaryMatrix2x2) -> None:
        """
        Apply an arbitrary 2x2 unitary to ``target_qubit``.

        Raises:
            NotImplementedError: If the backend has no general unitary primitive.
        """
        raise NotImplementedError(f"{type(self).__qualname__} has no general unitary implementation")
