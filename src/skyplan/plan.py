from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .core import DOCKER_PORT
from .logger import logger
from .planners.firewall import missing_ports, required_ports
from .planners.network import build_interfaces, zone_to_region
from .planners.tags import normalize_tags
from .regions import image_for_region, validate_region
from .schemas.firewall import FirewallRule, PortSpec, Workload
from .schemas.network import NetworkInterfaceDescriptor


class ProvisioningConfig(BaseModel):
    """Raw driver settings for one instance."""

    model_config = ConfigDict(frozen=True)

    project_id: str
    region: str
    zone: str = Field(default="", description="e.g. us-central1-a")
    network: str = "default"
    subnetwork: str = ""
    additional_networks: str = Field(default="", description="e.g. n1:s1,n2:,n3")
    use_internal_ip_only: bool = False
    tags: str = ""
    open_ports: tuple[str, ...] = ()
    docker_port: int = DOCKER_PORT
    swarm_master: bool = False
    swarm_host: str = ""
    global_url: str | None = None

    @field_validator("open_ports", mode="before")
    @classmethod
    def _split_ports(cls, value: object) -> object:
        if isinstance(value, str):
            return [p for p in value.split(",") if p]
        return value

    @property
    def network_region(self) -> str:
        return zone_to_region(self.zone) if self.zone else self.region

    def workload(self) -> Workload:
        return Workload(
            docker_port=self.docker_port,
            swarm_master=self.swarm_master,
            swarm_host=self.swarm_host,
            open_ports=self.open_ports,
        )


class ProvisioningPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    region: str
    image_id: str | None = None
    tags: tuple[str, ...] = ()
    required_ports: tuple[PortSpec, ...] = ()
    missing_ports: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    interfaces: tuple[NetworkInterfaceDescriptor, ...] = ()


def plan_provisioning(
    config: ProvisioningConfig, rules: Iterable[FirewallRule]
) -> ProvisioningPlan:
    """
    Everything needed to create an instance, computed from the driver
    settings and the firewall rules already in the project.

    Raises:
        InvalidRegionError: unknown region
        InvalidNetworkSpecError: malformed network or subnetwork
    """
    region = validate_region(config.region)

    ports = required_ports(config.workload())
    missing = missing_ports(rules, ports)

    interfaces = build_interfaces(
        config.network,
        config.subnetwork,
        config.additional_networks,
        config.use_internal_ip_only,
        config.project_id,
        config.network_region,
        global_url=config.global_url,
    )

    plan = ProvisioningPlan(
        region=region,
        image_id=image_for_region(region),
        tags=normalize_tags(config.tags),
        required_ports=ports,
        missing_ports=missing,
        interfaces=interfaces,
    )
    logger.info(
        f"Planned {len(interfaces)} interface(s) in {region}, "
        f"{sum(len(p) for p in missing.values())} port(s) to open"
    )
    return plan
