"""
Device kind enumeration.

`DeviceKind` names the class of hardware a computation runs on, independent
of any device index or storage layout.
"""

from enum import Enum


class DeviceKind(Enum):
    """
    Enumeration of supported device categories.

    The member values are the canonical kind names used by the device string
    format (`"cpu"`, `"cuda"`).

    Attributes
    ----------
    CPU : DeviceKind
        Central Processing Unit.
    CUDA : DeviceKind
        NVIDIA CUDA-enabled Graphics Processing Unit.
    """

    CPU = "cpu"
    CUDA = "cuda"

    def __str__(self) -> str:
        """
        Return the canonical kind name (e.g., "cuda").
        """
        return self.value
