import pytest

from elfprovider.machines import (
    NetworkStatus,
    NoMachineIPAddrError,
    convert_provider_id_to_uuid,
    convert_uuid_to_provider_id,
    get_network_status,
    is_control_plane_machine,
    is_uuid,
)


@pytest.mark.parametrize(
    ("provider_id", "expected"),
    [
        (None, ""),
        ("", ""),
        ("1234", ""),
        ("12345678-1234-1234-1234-123456789abc", ""),
        ("elf://12345678-1234-1234-1234-123456789abc", "12345678-1234-1234-1234-123456789abc"),
        ("elf://12345678-1234-1234-1234-123456789AbC", "12345678-1234-1234-1234-123456789AbC"),
        ("elf://12345678-1234-1234-1234-123456789abg", ""),
    ],
)
def test_convert_provider_id_to_uuid(provider_id, expected):
    assert convert_provider_id_to_uuid(provider_id) == expected


@pytest.mark.parametrize(
    ("uuid", "expected"),
    [
        ("", ""),
        ("1234", ""),
        ("12345678-1234-1234-1234-123456789abc", "elf://12345678-1234-1234-1234-123456789abc"),
        ("12345678-1234-1234-1234-123456789AbC", "elf://12345678-1234-1234-1234-123456789AbC"),
        ("12345678-1234-1234-1234-123456789abg", ""),
    ],
)
def test_convert_uuid_to_provider_id(uuid, expected):
    assert convert_uuid_to_provider_id(uuid) == expected


@pytest.mark.parametrize(
    ("uuid", "expected"),
    [
        ("", False),
        ("1234", False),
        ("12345678-1234-1234-1234-123456789abc", True),
        ("12345678-1234-1234-1234-123456789AbC", True),
        ("12345678-1234-1234-1234-123456789abg", False),
    ],
)
def test_is_uuid(uuid, expected):
    assert is_uuid(uuid) is expected


def test_uuid_with_trailing_newline_is_rejected():
    assert is_uuid("12345678-1234-1234-1234-123456789abc\n") is False
    assert convert_provider_id_to_uuid("elf://12345678-1234-1234-1234-123456789abc\n") == ""


def test_provider_id_round_trip():
    uuid = "12345678-1234-1234-1234-123456789abc"
    assert convert_provider_id_to_uuid(convert_uuid_to_provider_id(uuid)) == uuid


@pytest.mark.parametrize(
    ("ips", "expected"),
    [
        ("", []),
        ("127.0.0.1", []),
        ("169.254.0.1", []),
        ("172.17.0.1", []),
        ("116.116.116.116", [NetworkStatus(network_index=0, ip_addrs=["116.116.116.116"])]),
    ],
)
def test_get_network_status(ips, expected):
    assert get_network_status(ips) == expected


def test_get_network_status_keeps_original_index():
    result = get_network_status("127.0.0.1,116.116.116.116")
    assert result == [NetworkStatus(network_index=1, ip_addrs=["116.116.116.116"])]


def test_is_control_plane_machine():
    assert is_control_plane_machine({"cluster.x-k8s.io/control-plane": ""}) is True
    assert is_control_plane_machine({"cluster.x-k8s.io/cluster-name": "c"}) is False
    assert is_control_plane_machine(None) is False


def test_no_machine_ip_addr_error_message():
    err = NoMachineIPAddrError()
    assert isinstance(err, LookupError)
    assert "no IP addresses found for machine" in str(err)