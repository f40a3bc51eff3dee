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

# ruff: noqa: ANN001, ANN201 DOC201

"""Shared ruamel.yaml handler. Value types register themselves with ``@yaml.register_class``."""

import numpy as np
from ruamel.yaml import YAML


def ndarray_representer(representer, data):
    """Representer for ndarray"""
    value = {"dtype": str(data.dtype), "shape": list(data.shape), "data": data.ravel().tolist()}
    return representer.represent_mapping("!ndarray", value)


def ndarray_constructor(constructor, node):
    """Constructor for ndarray"""
    mapping = constructor.construct_mapping(node, deep=True)
    dtype = np.dtype(mapping["dtype"])
    return np.array(list(mapping["data"]), dtype=dtype).reshape(tuple(mapping["shape"]))


def np_scalar_representer(representer, data: np.generic):
    """Represent any NumPy scalar (e.g. np.int64, np.float32)."""
    return representer.represent_mapping("!np_scalar", {"dtype": str(data.dtype), "value": data.item()})


def np_scalar_constructor(constructor, node):
    """Reconstruct a NumPy scalar."""
    mapping = constructor.construct_mapping(node, deep=True)
    return np.dtype(mapping["dtype"]).type(mapping["value"])


def complex_representer(representer, data: complex):
    return representer.represent_mapping("!complex", {"real": data.real, "imag": data.imag})


def complex_constructor(constructor, node):
    mapping = constructor.construct_mapping(node, deep=True)
    return complex(mapping["real"], mapping["imag"])


def tuple_representer(representer, data: tuple):
    """Representer for built-in Python tuple."""
    return representer.represent_sequence("!tuple", list(data))


def tuple_constructor(constructor, node):
    """Constructor for built-in Python tuple."""
    return tuple(constructor.construct_sequence(node, deep=True))


yaml = YAML(typ="safe")

# NumPy arrays and scalars
yaml.representer.add_representer(np.ndarray, ndarray_representer)
yaml.constructor.add_constructor("!ndarray", ndarray_constructor)
yaml.representer.add_multi_representer(np.generic, np_scalar_representer)
yaml.constructor.add_constructor("!np_scalar", np_scalar_constructor)

# Built-in complex numbers and tuples
yaml.representer.add_representer(complex, complex_representer)
yaml.constructor.add_constructor("!complex", complex_constructor)
yaml.representer.add_representer(tuple, tuple_representer)
yaml.constructor.add_constructor("!tuple", tuple_constructor)
