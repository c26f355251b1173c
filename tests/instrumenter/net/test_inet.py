import pytest

from netsemconv.ext import net
from netsemconv.instrumenter import DictAttributesBuilder
from netsemconv.instrumenter.net import InetSocketAddressNetServerAttributesGetter
from netsemconv.instrumenter.net import NetServerAttributesExtractor
from netsemconv.instrumenter.net.inet import ip_family
from netsemconv.instrumenter.net.inet import sock_family_of
from netsemconv.instrumenter.net.inet import split_socket_address


class Connection(object):
    def __init__(self, peer=None, host=None, host_name=None, host_port=None):
        self.peer = peer
        self.host = host
        self.host_name = host_name
        self.host_port = host_port


class ConnectionGetter(InetSocketAddressNetServerAttributesGetter):
    def transport(self, request):
        return "ip_tcp"

    def host_name(self, request):
        return request.host_name

    def host_port(self, request):
        return request.host_port

    def get_peer_socket_address(self, request):
        return request.peer

    def get_host_socket_address(self, request):
        return request.host


@pytest.mark.parametrize(
    "address,expected",
    [
        (("10.0.0.5", 54321), ("10.0.0.5", 54321)),
        (("fe80::1%eth0", 8080, 0, 2), ("fe80::1%eth0", 8080)),
        ("/run/app.sock", ("/run/app.sock", None)),
        (b"/run/app.sock", ("/run/app.sock", None)),
        ("", (None, None)),
        (("10.0.0.5", None), ("10.0.0.5", None)),
        (("10.0.0.5", "8080"), ("10.0.0.5", None)),
        (("10.0.0.5", True), ("10.0.0.5", None)),
        ((None, 8080), (None, None)),
        (("10.0.0.5",), (None, None)),
        (1234, (None, None)),
        (None, (None, None)),
    ],
)
def test_split_socket_address(address, expected):
    assert split_socket_address(address) == expected


@pytest.mark.parametrize(
    "host,expected",
    [
        ("10.0.0.5", "inet"),
        ("::1", "inet6"),
        ("fe80::1%eth0", "inet6"),
        ("::ffff:10.0.0.5", "inet6"),
        ("svc.internal", None),
        ("", None),
    ],
)
def test_ip_family(host, expected):
    assert ip_family(host) == expected


@pytest.mark.parametrize(
    "address,expected",
    [
        (("10.0.0.5", 54321), "inet"),
        (("::1", 8080, 0, 0), "inet6"),
        ("/run/app.sock", "unix"),
        ("", None),
        (("localhost", 8080), None),
        (None, None),
    ],
)
def test_sock_family_of(address, expected):
    assert sock_family_of(address) == expected


def test_inet_getter():
    getter = ConnectionGetter()
    conn = Connection(peer=("::1", 54321, 0, 0), host=("::1", 8443, 0, 0), host_name="svc.internal", host_port=443)

    assert getter.sock_peer_addr(conn) == "::1"
    assert getter.sock_peer_port(conn) == 54321
    assert getter.sock_host_addr(conn) == "::1"
    assert getter.sock_host_port(conn) == 8443
    assert getter.sock_family(conn) == "inet6"


def test_inet_getter_family_from_host_address():
    getter = ConnectionGetter()

    assert getter.sock_family(Connection(host=("10.0.0.9", 8080))) == "inet"
    assert getter.sock_family(Connection(host="/run/app.sock")) == "unix"
    assert getter.sock_family(Connection()) is None


def test_extract_ipv4_connection():
    conn = Connection(peer=("10.0.0.5", 54321), host=("10.0.0.9", 8080), host_name="svc.internal", host_port=8080)
    attributes = DictAttributesBuilder()

    NetServerAttributesExtractor.create(ConnectionGetter()).on_start(attributes, None, conn)

    assert dict(attributes.build()) == {
        net.TRANSPORT: "ip_tcp",
        net.SOCK_PEER_ADDR: "10.0.0.5",
        net.SOCK_PEER_PORT: 54321,
        net.HOST_NAME: "svc.internal",
        net.HOST_PORT: 8080,
        net.SOCK_HOST_ADDR: "10.0.0.9",
    }


def test_extract_ipv6_connection():
    conn = Connection(peer=("::1", 54321, 0, 0), host=("::1", 8443, 0, 0), host_name="svc.internal", host_port=443)
    attributes = DictAttributesBuilder()

    NetServerAttributesExtractor.create(ConnectionGetter()).on_start(attributes, None, conn)

    assert dict(attributes.build()) == {
        net.TRANSPORT: "ip_tcp",
        net.SOCK_PEER_ADDR: "::1",
        net.SOCK_PEER_PORT: 54321,
        net.HOST_NAME: "svc.internal",
        net.HOST_PORT: 443,
        net.SOCK_HOST_ADDR: "::1",
        net.SOCK_HOST_PORT: 8443,
        net.SOCK_FAMILY: "inet6",
    }
