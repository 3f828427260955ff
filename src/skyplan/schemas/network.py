from pydantic import BaseModel, ConfigDict, Field


class NetworkAttachment(BaseModel):
    model_config = ConfigDict(frozen=True)

    network: str
    subnetwork: str | None = Field(
        default=None, description="None when the attachment has no subnetwork"
    )


class NetworkInterfaceDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    network_url: str
    subnetwork_url: str | None = None
    external_access: bool = Field(
        default=False, description="Only one interface per instance may be external"
    )
