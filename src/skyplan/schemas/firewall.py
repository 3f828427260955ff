from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core import DOCKER_PORT


class PortSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    port: str
    protocol: Literal["tcp", "udp"] = "tcp"

    def __str__(self) -> str:
        return f"{self.port}/{self.protocol}"


class FirewallRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    protocol: str
    ports: tuple[str, ...] = Field(
        default=(), description="Single ports or inclusive low-high ranges"
    )


class Workload(BaseModel):
    model_config = ConfigDict(frozen=True)

    docker_port: int = DOCKER_PORT
    swarm_master: bool = False
    swarm_host: str = Field(default="", description="e.g. tcp://host:3376")
    open_ports: tuple[str, ...] = Field(
        default=(), description="Extra ports, e.g. 80 or 2377/udp"
    )


# protocol -> missing ports, never holds an empty list
MissingPortsReport = dict[str, list[str]]
