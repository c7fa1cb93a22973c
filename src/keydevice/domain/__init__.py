from ._errors import (
    DeviceError,
    DeviceStringParseError,
    InvalidCpuIndexError,
    InvalidIndexError,
    UnsupportedBackendError,
)
from .device import Backend, Device, DeviceKind, DeviceLike, backend_to_kind

__all__ = [
    DeviceError.__name__,
    DeviceStringParseError.__name__,
    InvalidCpuIndexError.__name__,
    InvalidIndexError.__name__,
    UnsupportedBackendError.__name__,
    Backend.__name__,
    Device.__name__,
    DeviceKind.__name__,
    DeviceLike.__name__,
    backend_to_kind.__name__,
]
