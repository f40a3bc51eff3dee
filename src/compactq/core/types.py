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

from dataclasses import dataclass

import numpy as np
from typing_extensions import Self

from compactq.yaml import yaml


@yaml.register_class
@dataclass(frozen=True)
class ComplexScalar:
    """A complex number stored as its real and imaginary components."""

    real: float
    imag: float = 0.0

    @classmethod
    def from_complex(cls, value: complex) -> Self:
        value = complex(value)
        return cls(real=value.real, imag=value.imag)

    def to_complex(self) -> complex:
        return complex(self.real, self.imag)

    def conjugate(self) -> ComplexScalar:
        return ComplexScalar(real=self.real, imag=-self.imag)

    @property
    def modulus(self) -> float:
        return abs(self.to_complex())

    def __complex__(self) -> complex:
        return self.to_complex()


@yaml.register_class
@dataclass(frozen=True)
class CompactUnitaryParams:
    """
    The pair (alpha, beta) that determines the single-qubit unitary

    .. math::

        U = \\begin{pmatrix} \\alpha & -\\beta^* \\\\ \\beta & \\alpha^* \\end{pmatrix}

    The pair is only a valid gate when :math:`|\\alpha|^2 + |\\beta|^2 = 1`. This class never normalizes it.
    """

    alpha: ComplexScalar
    beta: ComplexScalar

    def conjugate(self) -> CompactUnitaryParams:
        """
        Negate the imaginary parts of alpha and beta.

        Returns:
            CompactUnitaryParams: The parameters of the element-wise conjugated unitary.
        """
        return CompactUnitaryParams(alpha=self.alpha.conjugate(), beta=self.beta.conjugate())

    def to_matrix(self) -> np.ndarray:
        """
        Build the dense matrix described by the parameters.

        Returns:
            np.ndarray: A 2x2 complex array.
        """
        alpha = self.alpha.to_complex()
        beta = self.beta.to_complex()
        return np.array([[alpha, -beta.conjugate()], [beta, alpha.conjugate()]], dtype=complex)


@yaml.register_class
@dataclass(frozen=True)
class UnitaryMatrix2x2:
    """A 2x2 complex matrix, candidate for use as a single-qubit gate."""

    r0c0: ComplexScalar
    r0c1: ComplexScalar
    r1c0: ComplexScalar
    r1c1: ComplexScalar

    @classmethod
    def from_array(cls, array: np.ndarray | list[list[complex]]) -> Self:
        """
        Build the matrix from any 2x2 array-like of complex numbers.

        Raises:
            ValueError: If the input is not 2x2.

        Returns:
            UnitaryMatrix2x2: The matrix with the same entries.
        """
        matrix = np.asarray(array, dtype=complex)
        if matrix.shape != (2, 2):
            raise ValueError(f"Expected a 2x2 matrix, got shape {matrix.shape}.")
        return cls(
            r0c0=ComplexScalar.from_complex(matrix[0, 0]),
            r0c1=ComplexScalar.from_complex(matrix[0, 1]),
            r1c0=ComplexScalar.from_complex(matrix[1, 0]),
            r1c1=ComplexScalar.from_complex(matrix[1, 1]),
        )

    def to_array(self) -> np.ndarray:
        return np.array(
            [
                [self.r0c0.to_complex(), self.r0c1.to_complex()],
                [self.r1c0.to_complex(), self.r1c1.to_complex()],
            ],
            dtype=complex,
        )

    def conjugate(self) -> UnitaryMatrix2x2:
        # Element-wise conjugate, without transposition.
        return UnitaryMatrix2x2(
            r0c0=self.r0c0.conjugate(),
            r0c1=self.r0c1.conjugate(),
            r1c0=self.r1c0.conjugate(),
            r1c1=self.r1c1.conjugate(),
        )


@yaml.register_class
@dataclass(frozen=True)
class RotationAxis:
    """A real 3-vector about which a single-qubit state is rotated."""

    x: float
    y: float
    z: float

    def norm(self) -> float:
        return float(np.sqrt(self.x**2 + self.y**2 + self.z**2))

    def normalized(self) -> RotationAxis:
        """
        Rescale the axis to unit length.

        A zero-length axis has no direction; its components come back as NaN.

        Returns:
            RotationAxis: The unit axis pointing along this one.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            unit = np.array([self.x, self.y, self.z], dtype=float) / np.float64(self.norm())
        return RotationAxis(x=float(unit[0]), y=float(unit[1]), z=float(unit[2]))
