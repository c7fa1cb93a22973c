"""
Backend enumeration and backend-to-kind mapping.

A `Backend` is finer-grained than a `DeviceKind`: it additionally encodes the
storage layout (dense or sparse) used on a given kind of hardware. Device
construction only needs the hardware kind, so `backend_to_kind` reduces a
backend to its `DeviceKind`.
"""

from __future__ import annotations

from enum import Enum

from .._errors import UnsupportedBackendError
from ._device_kind import DeviceKind


class Backend(Enum):
    """
    Enumeration of dispatch backends.

    Member values are the display names used in diagnostics.
    """

    CPU = "CPU"
    CUDA = "CUDA"
    SPARSE_CPU = "SparseCPU"
    SPARSE_CUDA = "SparseCUDA"
    UNDEFINED = "Undefined"

    def __str__(self) -> str:
        return self.value


_BACKEND_TO_KIND: dict[Backend, DeviceKind] = {
    Backend.CPU: DeviceKind.CPU,
    Backend.SPARSE_CPU: DeviceKind.CPU,
    Backend.CUDA: DeviceKind.CUDA,
    Backend.SPARSE_CUDA: DeviceKind.CUDA,
}


def backend_to_kind(backend: Backend) -> DeviceKind:
    """
    Convert a `Backend` to the `DeviceKind` it runs on.

    Parameters
    ----------
    backend : Backend
        Backend to convert.

    Returns
    -------
    DeviceKind
        `CPU` for dense/sparse CPU backends, `CUDA` for dense/sparse CUDA
        backends.

    Raises
    ------
    UnsupportedBackendError
        If `backend` has no device kind (e.g., `Backend.UNDEFINED`) or is not
        a `Backend` at all.
    """
    try:
        return _BACKEND_TO_KIND[backend]
    except (KeyError, TypeError):
        raise UnsupportedBackendError(backend) from None
