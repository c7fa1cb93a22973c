"""
Device abstraction contracts for KeyDevice.

This module defines a duck-typed `DeviceLike` protocol describing a
computation device descriptor without coupling to the concrete `Device`
class. Consumers such as dispatch tables or tensor wrappers can type against
it and accept any object with the same surface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ._device_kind import DeviceKind


@runtime_checkable
class DeviceLike(Protocol):
    """
    Duck-typed device contract.

    Any object that provides these members can be used as a computation
    device descriptor, regardless of its concrete class identity.

    Notes
    -----
    `isinstance` checks against a `runtime_checkable` protocol only verify
    that the members exist, not their types.
    """

    @property
    def kind(self) -> DeviceKind: ...

    @property
    def index(self) -> int: ...

    def has_index(self) -> bool: ...
    def is_cpu(self) -> bool: ...
    def is_cuda(self) -> bool: ...
    def __str__(self) -> str: ...
