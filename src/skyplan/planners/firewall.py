from collections.abc import Iterable, Sequence
from urllib.parse import urlsplit

from ..core import DEFAULT_PROTOCOL, DEFAULT_SWARM_PORT, PROTOCOLS
from ..logger import logger
from ..schemas.firewall import FirewallRule, MissingPortsReport, PortSpec, Workload


def parse_port_spec(raw: str) -> PortSpec:
    """
    Parses "port[/protocol]", e.g. "80" -> 80/tcp, "2377/udp" -> 2377/udp.
    Unknown protocols fall back to tcp.
    """
    port, _, protocol = raw.partition("/")
    protocol = protocol.lower() or DEFAULT_PROTOCOL
    if protocol not in PROTOCOLS:
        logger.warning(
            f"Unsupported protocol '{protocol}' for port {port}, using {DEFAULT_PROTOCOL}"
        )
        protocol = DEFAULT_PROTOCOL
    return PortSpec(port=port, protocol=protocol)


def swarm_port(swarm_host: str) -> str:
    """
    Port of the swarm master URL (tcp://host:4242 -> 4242).
    Falls back to the default swarm port instead of failing.
    """
    try:
        port = urlsplit(swarm_host).port
    except ValueError as e:
        logger.warning(
            f"Could not parse swarm host '{swarm_host}': {e}, "
            f"using port {DEFAULT_SWARM_PORT}"
        )
        return str(DEFAULT_SWARM_PORT)

    # Missing or 0, neither can be opened
    if not port:
        logger.debug(
            f"No usable port in swarm host '{swarm_host}', using {DEFAULT_SWARM_PORT}"
        )
        return str(DEFAULT_SWARM_PORT)
    return str(port)


def required_ports(workload: Workload) -> list[PortSpec]:
    """Ports the workload needs opened: docker, swarm (if master), extras."""
    ports = [PortSpec(port=str(workload.docker_port))]

    if workload.swarm_master:
        ports.append(PortSpec(port=swarm_port(workload.swarm_host)))

    ports.extend(parse_port_spec(p) for p in workload.open_ports)
    return ports


def _is_port_number(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _in_range(port: str, entry: str) -> bool:
    low, sep, high = entry.partition("-")
    if not sep:
        return False
    if not (_is_port_number(low) and _is_port_number(high)):
        logger.warning(f"Ignoring malformed port range '{entry}'")
        return False
    if not _is_port_number(port):
        logger.warning(f"Port '{port}' is not a number, no range can cover it")
        return False
    return int(low) <= int(port) <= int(high)


def port_in_rule(port: str, rule: FirewallRule) -> bool:
    """True if the rule lists the port or an inclusive range containing it."""
    return any(entry == port or _in_range(port, entry) for entry in rule.ports)


def missing_ports(
    rules: Iterable[FirewallRule], required: Sequence[PortSpec | str]
) -> MissingPortsReport:
    """
    Required ports not covered by any rule of the same protocol,
    grouped by protocol in first-seen order, without duplicates.
    """
    rules = list(rules)
    missing: MissingPortsReport = {}

    for spec in required:
        if isinstance(spec, str):
            spec = parse_port_spec(spec)

        covered = any(
            rule.protocol.lower() == spec.protocol and port_in_rule(spec.port, rule)
            for rule in rules
        )
        if covered:
            continue

        bucket = missing.setdefault(spec.protocol, [])
        if spec.port not in bucket:
            bucket.append(spec.port)

    if missing:
        logger.debug(f"Missing firewall ports: {missing}")
    return missing
