from pydantic import BaseModel, ConfigDict, Field


class Region(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    image_id: str = Field(description="Boot image (AMI) id, empty when not bootable")
