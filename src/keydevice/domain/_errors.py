"""
Device identity exceptions for KeyDevice.

This module defines the errors raised while constructing, parsing, or
mutating a `Device`. Every error is raised at the point where invalid input
is detected, so no partially constructed device is ever observable.

All errors derive from `DeviceError`, which itself derives from `ValueError`:
they describe malformed input (e.g., an untrusted configuration value), not
transient runtime faults, and callers may catch them to recover.
"""

from __future__ import annotations

from typing import Any


class DeviceError(ValueError):
    """
    Base class for all device identity errors.
    """


class InvalidIndexError(DeviceError):
    """
    Raised when a device index is below -1 or does not fit a signed 32-bit
    integer.

    Attributes
    ----------
    index : int
        The rejected index value.
    """

    def __init__(self, index: int) -> None:
        """
        Initialize the InvalidIndexError.

        Parameters
        ----------
        index : int
            The rejected index value.
        """
        super().__init__(
            f"Device index must be -1 or a non-negative int32, got {index}."
        )
        self.index = index


class InvalidCpuIndexError(DeviceError):
    """
    Raised when a CPU device is given an index other than -1 or 0.

    Attributes
    ----------
    index : int
        The rejected index value.
    """

    def __init__(self, index: int) -> None:
        super().__init__(f"CPU device index must be -1 or zero, got {index}.")
        self.index = index


class UnsupportedBackendError(DeviceError):
    """
    Raised when a backend has no corresponding device kind.

    Attributes
    ----------
    backend : Any
        The backend that could not be mapped.
    """

    def __init__(self, backend: Any) -> None:
        super().__init__(f"Invalid backend {backend} for Device construction.")
        self.backend = backend


class DeviceStringParseError(DeviceError):
    """
    Raised when a device string does not match the `kind[:index]` grammar.

    Attributes
    ----------
    text : Any
        The offending input, kept verbatim for diagnostics.
    """

    def __init__(self, text: Any) -> None:
        super().__init__(
            f"Invalid device string {text!r}. "
            "Expected 'cpu', 'cuda', or '<kind>:<index>'."
        )
        self.text = text
