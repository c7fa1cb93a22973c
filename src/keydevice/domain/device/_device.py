"""
Device identity value type.

This module defines `Device`, a validated descriptor naming a compute target
by its hardware kind (`DeviceKind`) and an optional ordinal index. Tensor
runtimes use it as a dispatch key, so construction enforces the following
invariants for every live instance:

1. The index is either -1 ("unspecified, use the current device") or a
   non-negative signed 32-bit integer.
2. A CPU device has index -1 or 0; there is no second CPU.

Equality is exact structural equality of `(kind, index)`. No normalization is
applied: `cpu` and `cpu:0` are different devices even though both denote
"the" CPU.

A device can be built three ways, all explicit:

- `Device(DeviceKind.CUDA, 1)`
- `Device.from_backend(Backend.SPARSE_CUDA, 1)`
- `Device.parse("cuda:1")`

The kind is fixed at construction. The index can only be rebound through
`Device.set_index`, which re-runs the full invariant set.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

import numpy as np
from typing_extensions import Self

from .._errors import (
    DeviceStringParseError,
    InvalidCpuIndexError,
    InvalidIndexError,
)
from ._backend import Backend, backend_to_kind
from ._device_kind import DeviceKind

logger = logging.getLogger(__name__)

_INT32_MAX = int(np.iinfo(np.int32).max)
_INT32_DIGITS = len(str(_INT32_MAX))


def _validated_index(kind: DeviceKind, index: Any) -> int:
    """
    Check `index` against the device invariants for `kind`.

    Parameters
    ----------
    kind : DeviceKind
        Kind of the device the index belongs to.
    index : Any
        Candidate index. Must be a Python `int` or a NumPy integer scalar.

    Returns
    -------
    int
        The index as a plain Python `int`.

    Raises
    ------
    TypeError
        If `index` is not an integer (booleans are rejected).
    InvalidIndexError
        If `index` is below -1 or above the int32 maximum.
    InvalidCpuIndexError
        If `kind` is CPU and `index` is 1 or greater.
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise TypeError(
            f"Device index must be an integer, got {type(index).__name__}."
        )
    index = int(index)
    if index < -1 or index > _INT32_MAX:
        raise InvalidIndexError(index)
    if kind is DeviceKind.CPU and index > 0:
        raise InvalidCpuIndexError(index)
    return index


class Device:
    """
    Concrete computation device descriptor.

    Parameters
    ----------
    kind : DeviceKind
        Hardware kind. Strings and backends are not accepted here; use
        `Device.parse` or `Device.from_backend`.
    index : int, optional
        Device ordinal. Defaults to -1 (unspecified / current device).

    Raises
    ------
    TypeError
        If `kind` is not a `DeviceKind` or `index` is not an integer.
    InvalidIndexError
        If `index` is below -1 or does not fit int32.
    InvalidCpuIndexError
        If `kind` is CPU and `index` is 1 or greater.

    Notes
    -----
    - `__slots__` prevents dynamic attribute creation; `kind` and `index`
      are read-only properties.
    - The class does not allocate or manage any backend resources.
    - `set_index` mutates the instance in place and is not synchronized.
    """

    __slots__ = ("_kind", "_index")

    _PATTERN = re.compile(r"(cpu|cuda)(?::([0-9]+))?")

    def __init__(self, kind: DeviceKind, index: int = -1) -> None:
        if not isinstance(kind, DeviceKind):
            raise TypeError(
                f"Device kind must be a DeviceKind, got {type(kind).__name__}. "
                "Use Device.parse() for strings or Device.from_backend() for "
                "backends."
            )
        self._index = _validated_index(kind, index)
        self._kind = kind

    # -----------------------------
    # Factories
    # -----------------------------

    @classmethod
    def from_backend(cls, backend: Backend, index: int = -1) -> Self:
        """
        Construct a device from a `Backend` and an optional index.

        The backend is reduced to its `DeviceKind`, then validation proceeds
        exactly as in the regular constructor.

        Raises
        ------
        UnsupportedBackendError
            If `backend` has no corresponding device kind.
        """
        return cls(backend_to_kind(backend), index)

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Construct a device from its string form.

        The whole string must match `(cpu|cuda)(:<digits>)?`. Matching is
        case-sensitive and whitespace is not stripped. Signs, hexadecimal
        digits, an empty index and a bare number are all rejected.

        Parameters
        ----------
        text : str
            Device string, e.g. "cpu", "cpu:0" or "cuda:3".

        Returns
        -------
        Device
            The parsed device.

        Raises
        ------
        TypeError
            If `text` is not a string.
        DeviceStringParseError
            If `text` does not match the grammar.
        InvalidIndexError, InvalidCpuIndexError
            If the string is well-formed but names an invalid device
            (e.g., "cpu:1").
        """
        if not isinstance(text, str):
            raise TypeError(
                f"Device string must be a str, got {type(text).__name__}."
            )
        m = cls._PATTERN.fullmatch(text)
        if m is None:
            raise DeviceStringParseError(text)
        kind = DeviceKind(m.group(1))
        digits = m.group(2)
        if digits is None:
            return cls(kind)
        # at most as many significant digits as the int32 maximum
        significant = digits.lstrip("0") or "0"
        if len(significant) > _INT32_DIGITS:
            raise InvalidIndexError(digits)
        return cls(kind, int(significant))

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> Self:
        """
        Rebuild a device from the output of `get_config`.

        Raises
        ------
        DeviceStringParseError
            If the "device" entry is missing, not a string, or malformed,
            or if `cfg` is not a mapping.
        """
        if not isinstance(cfg, Mapping):
            raise DeviceStringParseError(cfg)
        text = cfg.get("device")
        if not isinstance(text, str):
            raise DeviceStringParseError(text)
        return cls.parse(text)

    # -----------------------------
    # Accessors
    # -----------------------------

    @property
    def kind(self) -> DeviceKind:
        """The hardware kind of this device."""
        return self._kind

    @property
    def type(self) -> DeviceKind:
        """Alias of `kind`."""
        return self._kind

    @property
    def index(self) -> int:
        """The device ordinal, or -1 when unspecified."""
        return self._index

    def has_index(self) -> bool:
        """
        Check whether this device carries a concrete index.

        Returns
        -------
        bool
            True if the index is not -1.
        """
        return self._index != -1

    def is_cpu(self) -> bool:
        """
        Check whether this device represents a CPU.

        Returns
        -------
        bool
            True if the device kind is CPU, False otherwise.
        """
        return self._kind is DeviceKind.CPU

    def is_cuda(self) -> bool:
        """
        Check whether this device represents a CUDA GPU.

        Returns
        -------
        bool
            True if the device kind is CUDA, False otherwise.
        """
        return self._kind is DeviceKind.CUDA

    # -----------------------------
    # Mutation
    # -----------------------------

    def set_index(self, index: int) -> None:
        """
        Rebind the device index in place.

        Both invariants are checked against this device's kind before the
        index is replaced, so a CPU device cannot be moved to index 1 or
        above. On failure the device is left unchanged.

        Parameters
        ----------
        index : int
            New index, -1 or a non-negative int32.

        Raises
        ------
        TypeError
            If `index` is not an integer.
        InvalidIndexError
            If `index` is below -1 or does not fit int32.
        InvalidCpuIndexError
            If this is a CPU device and `index` is 1 or greater.
        """
        new_index = _validated_index(self._kind, index)
        logger.debug("Rebinding device %s to index %d", self, new_index)
        self._index = new_index

    # -----------------------------
    # Serialization
    # -----------------------------

    def get_config(self) -> dict[str, Any]:
        """
        Return a JSON-serializable configuration for this device.

        Returns
        -------
        dict[str, Any]
            `{"device": <canonical string>}`.
        """
        return {"device": str(self)}

    # -----------------------------
    # Dunder methods
    # -----------------------------

    def __str__(self) -> str:
        """
        Return the canonical string representation of the device.

        Returns
        -------
        str
            The kind name alone when the index is unspecified, otherwise
            "<kind>:<index>". The result is accepted by `Device.parse`.
        """
        if self._index == -1:
            return str(self._kind)
        return f"{self._kind}:{self._index}"

    def __repr__(self) -> str:
        return f"Device(kind=DeviceKind.{self._kind.name}, index={self._index})"

    def __eq__(self, other: object) -> bool:
        """
        Compare two devices for exact structural equality.

        Devices are equal only if both kind and index match; `cpu` and
        `cpu:0` are not equal.
        """
        if not isinstance(other, Device):
            return NotImplemented
        return (self._kind, self._index) == (other._kind, other._index)

    def __hash__(self) -> int:
        return hash((self._kind, self._index))
