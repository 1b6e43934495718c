"""Device profile model.

A device is identified by its ``name``; ``id`` is only used to address
user-defined (custom) devices in the persisted custom-device list.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from viewdeck.workspace.models.enums import DeviceCapability, DeviceOS, DeviceSource, DeviceType


class Device(BaseModel):
    """A simulated device viewport."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(description="Unique key; active devices are persisted by name")
    width: int
    height: int
    added: bool = Field(default=False, description="Active by default when nothing is persisted")
    user_agent: str = ""
    capabilities: list[DeviceCapability] = Field(default_factory=list)
    os: DeviceOS = DeviceOS.PC
    type: DeviceType = DeviceType.DESKTOP
    source: DeviceSource = DeviceSource.BUILT_IN
