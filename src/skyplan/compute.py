"""
Conversion between planner values and google.cloud.compute_v1 messages.

Nothing here talks to the API: callers fetch firewalls and create
instances with their own clients.
"""

from collections.abc import Iterable
from typing import Any

from google.cloud import compute_v1

from .core import (
    BASELINE_TAG,
    EXTERNAL_NAT_NAME,
    EXTERNAL_NAT_TYPE,
    FIREWALL_RULE_NAME,
)
from .schemas.firewall import FirewallRule, MissingPortsReport
from .schemas.network import NetworkInterfaceDescriptor


def rules_from_firewall(firewall: Any) -> list[FirewallRule]:
    """
    Flattens the 'allowed' entries of a compute Firewall.
    Egress and disabled firewalls open nothing inbound and yield no rules.
    """
    # Unset direction defaults to INGRESS on the API side
    direction = str(firewall.direction or "INGRESS").upper()
    if direction != "INGRESS" or firewall.disabled:
        return []

    rules = []
    for item in firewall.allowed or []:
        protocol = str(
            getattr(item, "I_p_protocol", getattr(item, "IP_protocol", "unknown"))
        )
        rules.append(
            FirewallRule(protocol=protocol.lower(), ports=list(item.ports or []))
        )
    return rules


def rules_from_firewalls(firewalls: Iterable[Any]) -> list[FirewallRule]:
    return [rule for fw in firewalls for rule in rules_from_firewall(fw)]


def to_network_interfaces(
    descriptors: Iterable[NetworkInterfaceDescriptor],
) -> list[compute_v1.NetworkInterface]:
    interfaces = []
    for desc in descriptors:
        fields: dict[str, Any] = {"network": desc.network_url}
        if desc.subnetwork_url:
            fields["subnetwork"] = desc.subnetwork_url
        if desc.external_access:
            fields["access_configs"] = [
                compute_v1.AccessConfig(name=EXTERNAL_NAT_NAME, type_=EXTERNAL_NAT_TYPE)
            ]
        interfaces.append(compute_v1.NetworkInterface(**fields))
    return interfaces


def to_firewall(
    network_url: str,
    missing: MissingPortsReport,
    name: str = FIREWALL_RULE_NAME,
    target_tags: list[str] | None = None,
) -> compute_v1.Firewall:
    """
    Ingress rule opening the missing ports to instances with the baseline tag.

    Raises:
        ValueError: the report is empty, there is nothing to open
    """
    if not missing:
        raise ValueError("No missing ports to open")

    return compute_v1.Firewall(
        name=name,
        network=network_url,
        direction="INGRESS",
        source_ranges=["0.0.0.0/0"],
        target_tags=target_tags or [BASELINE_TAG],
        allowed=[
            compute_v1.Allowed(I_p_protocol=protocol, ports=list(ports))
            for protocol, ports in missing.items()
        ],
    )
