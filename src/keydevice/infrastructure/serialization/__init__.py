from ._device_config import (
    device_from_config,
    device_to_config,
    dumps_device,
    loads_device,
)

__all__ = [
    device_from_config.__name__,
    device_to_config.__name__,
    dumps_device.__name__,
    loads_device.__name__,
]
