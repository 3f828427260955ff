import pytest
from google.cloud import compute_v1

from skyplan.compute import (
    rules_from_firewall,
    rules_from_firewalls,
    to_firewall,
    to_network_interfaces,
)
from skyplan.planners.firewall import missing_ports
from skyplan.planners.network import build_interfaces
from skyplan.schemas.firewall import FirewallRule


def _mock_firewall(mocker, allowed, direction="INGRESS", disabled=False):
    fw = mocker.Mock()
    fw.direction = direction
    fw.disabled = disabled
    fw.allowed = allowed
    return fw


def test_rules_from_firewall_mock(mocker):
    fw = _mock_firewall(
        mocker,
        [
            mocker.Mock(I_p_protocol="tcp", ports=["22", "1024-2048"]),
            mocker.Mock(I_p_protocol="UDP", ports=None),
        ],
    )

    rules = rules_from_firewall(fw)

    assert rules == [
        FirewallRule(protocol="tcp", ports=["22", "1024-2048"]),
        FirewallRule(protocol="udp", ports=[]),
    ]


def test_rules_from_firewall_without_allowed(mocker):
    assert rules_from_firewall(_mock_firewall(mocker, [])) == []


def test_rules_from_firewalls_feed_audit(mocker):
    fw1 = _mock_firewall(mocker, [mocker.Mock(I_p_protocol="tcp", ports=["2376"])])
    fw2 = _mock_firewall(
        mocker, [mocker.Mock(I_p_protocol="tcp", ports=["3000-4000"])]
    )

    rules = rules_from_firewalls([fw1, fw2])

    assert missing_ports(rules, ["2376", "3376", "80"]) == {"tcp": ["80"]}


def test_egress_and_disabled_firewalls_open_nothing():
    egress = compute_v1.Firewall(
        direction="EGRESS",
        allowed=[compute_v1.Allowed(I_p_protocol="tcp", ports=["2376"])],
    )
    disabled = compute_v1.Firewall(
        direction="INGRESS",
        disabled=True,
        allowed=[compute_v1.Allowed(I_p_protocol="tcp", ports=["3376"])],
    )

    rules = rules_from_firewalls([egress, disabled])

    assert rules == []
    assert missing_ports(rules, ["2376", "3376"]) == {"tcp": ["2376", "3376"]}


def test_unset_direction_counts_as_ingress():
    fw = compute_v1.Firewall(
        allowed=[compute_v1.Allowed(I_p_protocol="tcp", ports=["2376"])]
    )

    assert rules_from_firewall(fw) == [FirewallRule(protocol="tcp", ports=["2376"])]


def test_to_network_interfaces():
    descriptors = build_interfaces(
        "network",
        "subnetwork",
        "network-1:,network-2:subnetwork-2",
        False,
        "project",
        "zone",
        global_url="https://global",
    )

    nics = to_network_interfaces(descriptors)

    assert len(nics) == 3
    assert nics[0].network == "https://global/networks/network"
    assert nics[0].subnetwork == "projects/project/regions/zone/subnetworks/subnetwork"
    assert len(nics[0].access_configs) == 1
    assert nics[0].access_configs[0].type_ == "ONE_TO_ONE_NAT"

    assert nics[1].subnetwork == ""
    assert len(nics[1].access_configs) == 0
    assert len(nics[2].access_configs) == 0


def test_to_firewall():
    fw = to_firewall(
        "https://global/networks/default",
        {"tcp": ["2376", "80"], "udp": ["2377"]},
    )

    assert fw.name == "docker-machines"
    assert fw.direction == "INGRESS"
    assert list(fw.source_ranges) == ["0.0.0.0/0"]
    assert list(fw.target_tags) == ["docker-machine"]
    assert [a.I_p_protocol for a in fw.allowed] == ["tcp", "udp"]
    assert list(fw.allowed[0].ports) == ["2376", "80"]
    assert list(fw.allowed[1].ports) == ["2377"]


def test_to_firewall_custom_name_and_tags():
    fw = to_firewall(
        "https://global/networks/default",
        {"tcp": ["80"]},
        name="web",
        target_tags=["web"],
    )

    assert fw.name == "web"
    assert list(fw.target_tags) == ["web"]


def test_to_firewall_rejects_empty_report():
    with pytest.raises(ValueError):
        to_firewall("https://global/networks/default", {})
