from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from ...domain.device._device import Device

logger = logging.getLogger(__name__)

_NODE_TYPE = "Device"


def device_to_config(device: Device) -> dict[str, Any]:
    """
    Convert a Device into a JSON-serializable configuration node.

    Node format
    -----------
    {
      "type": "Device",
      "config": {"device": "cuda:0"}
    }
    """
    return {"type": _NODE_TYPE, "config": device.get_config()}


def device_from_config(node: Mapping[str, Any]) -> Device:
    """
    Rebuild a Device from a configuration node.
    """
    if not isinstance(node, Mapping):
        raise ValueError(
            f"Device config node must be a mapping, got {type(node).__name__}."
        )
    type_name = str(node.get("type"))
    if type_name != _NODE_TYPE:
        raise ValueError(
            f"Unknown node type '{type_name}'. Expected '{_NODE_TYPE}'."
        )

    cfg = node.get("config", {}) or {}
    device = Device.from_config(cfg)
    logger.debug("Loaded device %s from config", device)
    return device


def dumps_device(device: Device) -> str:
    """
    Serialize a Device to a JSON string.
    """
    return json.dumps(device_to_config(device))


def loads_device(text: str) -> Device:
    """
    Deserialize a Device from a JSON string produced by `dumps_device`.
    """
    return device_from_config(json.loads(text))
