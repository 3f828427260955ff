import re

from ..core import COMPUTE_API_URL, NETWORK_NAME_MAX_LENGTH, NETWORK_NAME_PATTERN
from ..errors import InvalidNetworkSpecError
from ..logger import logger
from ..schemas.network import NetworkAttachment, NetworkInterfaceDescriptor

NAME_RE = re.compile(NETWORK_NAME_PATTERN)


def is_valid_name(name: str) -> bool:
    return len(name) <= NETWORK_NAME_MAX_LENGTH and NAME_RE.fullmatch(name) is not None


def _check_name(segment: str, kind: str, name: str) -> None:
    if not name:
        raise InvalidNetworkSpecError(segment, f"{kind} name is empty")
    if len(name) > NETWORK_NAME_MAX_LENGTH:
        raise InvalidNetworkSpecError(
            segment, f"{kind} name is longer than {NETWORK_NAME_MAX_LENGTH} characters"
        )
    if not NAME_RE.fullmatch(name):
        raise InvalidNetworkSpecError(
            segment,
            f"{kind} name '{name}' must start with a letter, end with a letter "
            "or digit and contain only lowercase letters, digits and hyphens",
        )


def parse_attachment(segment: str) -> NetworkAttachment:
    """
    Parses one "network[:subnetwork]" token.
    An empty subnetwork ("network:") means the attachment has none.

    Raises:
        InvalidNetworkSpecError: either name breaks the naming rules
    """
    network, _, subnetwork = segment.partition(":")

    _check_name(segment, "network", network)
    if subnetwork:
        _check_name(segment, "subnetwork", subnetwork)

    return NetworkAttachment(network=network, subnetwork=subnetwork or None)


def parse_additional_networks(raw: str) -> list[NetworkAttachment]:
    """
    Parses "n1:s1,n2:,n3" into attachments in declaration order.
    Stops at the first invalid token.
    """
    if not raw:
        return []
    return [parse_attachment(segment) for segment in raw.split(",")]


def zone_to_region(zone: str) -> str:
    """us-central1-b -> us-central1"""
    return zone.rsplit("-", 1)[0]


def network_url(global_url: str, network: str) -> str:
    return f"{global_url}/networks/{network}"


def subnetwork_url(project_id: str, region: str, subnetwork: str) -> str:
    return f"projects/{project_id}/regions/{region}/subnetworks/{subnetwork}"


def _descriptor(
    attachment: NetworkAttachment,
    global_url: str,
    project_id: str,
    region: str,
    external_access: bool,
) -> NetworkInterfaceDescriptor:
    sub_url = None
    if attachment.subnetwork:
        sub_url = subnetwork_url(project_id, region, attachment.subnetwork)
    return NetworkInterfaceDescriptor(
        network_url=network_url(global_url, attachment.network),
        subnetwork_url=sub_url,
        external_access=external_access,
    )


def build_interfaces(
    primary_network: str,
    primary_subnetwork: str | None,
    additional_networks_raw: str,
    use_internal_ip_only: bool,
    project_id: str,
    region: str,
    global_url: str | None = None,
) -> list[NetworkInterfaceDescriptor]:
    """
    Network interfaces for a new instance: the primary network first,
    then the additional networks in declaration order.

    Only the primary interface can get an external IP, and only when
    use_internal_ip_only is False.

    Raises:
        InvalidNetworkSpecError: a network token is malformed, nothing is built
    """
    if global_url is None:
        global_url = f"{COMPUTE_API_URL}{project_id}/global"

    _check_name(primary_network, "network", primary_network)
    if primary_subnetwork:
        _check_name(primary_subnetwork, "subnetwork", primary_subnetwork)
    primary = NetworkAttachment(
        network=primary_network, subnetwork=primary_subnetwork or None
    )
    additional = parse_additional_networks(additional_networks_raw)

    interfaces = [
        _descriptor(primary, global_url, project_id, region, not use_internal_ip_only)
    ]
    for attachment in additional:
        interfaces.append(_descriptor(attachment, global_url, project_id, region, False))

    logger.debug(
        f"Prepared {len(interfaces)} network interface(s) for project {project_id}"
    )
    return interfaces
