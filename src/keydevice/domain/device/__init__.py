from ._device_kind import DeviceKind
from ._backend import Backend, backend_to_kind
from ._device import Device
from ._device_protocol import DeviceLike

__all__ = [
    DeviceKind.__name__,
    Backend.__name__,
    backend_to_kind.__name__,
    Device.__name__,
    DeviceLike.__name__,
]
