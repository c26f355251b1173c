"""
Standard network connection attributes for server spans.

For example:

attributes.set(HOST_NAME, "api.example.com")
attributes.set(SOCK_PEER_PORT, 54321)
"""

from netsemconv.ext import SockFamily


TRANSPORT = "net.transport"

# logical host, as seen by the client
HOST_NAME = "net.host.name"
HOST_PORT = "net.host.port"

# socket level addresses
SOCK_PEER_ADDR = "net.sock.peer.addr"
SOCK_PEER_PORT = "net.sock.peer.port"
SOCK_HOST_ADDR = "net.sock.host.addr"
SOCK_HOST_PORT = "net.sock.host.port"
SOCK_FAMILY = "net.sock.family"

SOCK_FAMILY_INET = SockFamily.INET.value

ALL_KEYS = frozenset(
    (
        TRANSPORT,
        HOST_NAME,
        HOST_PORT,
        SOCK_PEER_ADDR,
        SOCK_PEER_PORT,
        SOCK_HOST_ADDR,
        SOCK_HOST_PORT,
        SOCK_FAMILY,
    )
)
