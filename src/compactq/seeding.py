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
Seeding of the Mersenne Twister used for measurement sampling.

The generator lives in a :class:`RandomContext` that callers receive explicitly. :func:`get_random_context` holds
the process-wide instance. In a multi-process run every process derives the same kind of seed, but only the
master process's draws are used, so collisions between processes are harmless.
"""

from __future__ import annotations

import os
import socket
import time
from typing import TYPE_CHECKING

import numpy as np
from loguru import logger

if TYPE_CHECKING:
    from collections.abc import Sequence

MAX_SEEDS = 64
_UINT64_MASK = (1 << 64) - 1
_UINT32_MASK = (1 << 32) - 1


def hash_string(text: str) -> int:
    """
    DJB2 hash of ``text`` (start at 5381, then ``hash * 33 + byte`` for every byte), as an unsigned 64-bit value.

    Bytes are read as signed ``char`` values, so bytes from 0x80 up count as ``byte - 256``, as a C
    implementation over ``char`` on common platforms does.

    Args:
        text (str): The string to hash. It is encoded as UTF-8.

    Returns:
        int: The hash.
    """
    value = 5381
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte >= 0x80 else byte
        value = ((value << 5) + value + signed) & _UINT64_MASK
    return value


def default_seed_material(msecs: int | None = None, pid: int | None = None, hostname: str | None = None) -> list[int]:
    """
    Build the three seeds ``[milliseconds, process id, hash of host name]``.

    Missing values are taken from the wall clock, the current process and the local host.

    Returns:
        list[int]: The seed material.
    """
    if msecs is None:
        msecs = time.time_ns() // 1_000_000
    if pid is None:
        pid = os.getpid()
    if hostname is None:
        hostname = socket.gethostname()
    return [msecs & _UINT64_MASK, pid & _UINT64_MASK, hash_string(hostname)]


class RandomContext:
    """
    A Mersenne Twister generator together with the seeds that initialized it.

    Seeding goes through the generator's array initialization, so the state is a deterministic function of the
    seed list. Each seed contributes its lowest 32 bits. Access is not synchronized; callers that share a context
    across threads must serialize it.
    """

    def __init__(self, seeds: Sequence[int] | None = None) -> None:
        self._seed_material: tuple[int, ...] = ()
        self._generator = np.random.RandomState()
        if seeds is None:
            self.seed_default()
        else:
            self.seed(seeds)

    @property
    def seed_material(self) -> tuple[int, ...]:
        return self._seed_material

    @property
    def generator(self) -> np.random.RandomState:
        return self._generator

    def seed(self, seeds: Sequence[int]) -> None:
        """
        Reinitialize the generator from caller-supplied seeds.

        Args:
            seeds (Sequence[int]): Between 1 and 64 non-negative integers.

        Raises:
            ValueError: If there are no seeds, more than 64, or a negative one.
        """
        seeds = [int(seed) for seed in seeds]
        if not seeds:
            raise ValueError("At least one seed is required.")
        if len(seeds) > MAX_SEEDS:
            raise ValueError(f"At most {MAX_SEEDS} seeds are supported, got {len(seeds)}.")
        if any(seed < 0 for seed in seeds):
            raise ValueError("Seeds must be unsigned integers.")

        # A list (not an array or int) keeps numpy on the array-initialization path even for a single seed.
        self._generator.seed([seed & _UINT32_MASK for seed in seeds])
        self._seed_material = tuple(seeds)
        logger.debug("Random generator seeded with {} seeds", len(seeds))

    def seed_default(self) -> None:
        self.seed(default_seed_material())

    def random(self) -> float:
        """Draw a float uniformly from [0, 1)."""
        return float(self._generator.random_sample())


_context: RandomContext | None = None


def get_random_context() -> RandomContext:
    """
    Return the process-wide :class:`RandomContext`, creating it with default seeds on first use.

    Returns:
        RandomContext: The shared context.
    """
    global _context  # noqa: PLW0603
    if _context is None:
        _context = RandomContext()
    return _context
