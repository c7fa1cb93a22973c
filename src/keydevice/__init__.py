from .domain import (
    Backend,
    Device,
    DeviceError,
    DeviceKind,
    DeviceLike,
    DeviceStringParseError,
    InvalidCpuIndexError,
    InvalidIndexError,
    UnsupportedBackendError,
    backend_to_kind,
)

__all__ = [
    Backend.__name__,
    Device.__name__,
    DeviceError.__name__,
    DeviceKind.__name__,
    DeviceLike.__name__,
    DeviceStringParseError.__name__,
    InvalidCpuIndexError.__name__,
    InvalidIndexError.__name__,
    UnsupportedBackendError.__name__,
    backend_to_kind.__name__,
]
