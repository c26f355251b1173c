import abc
import ipaddress
import os
from typing import Any
from typing import Optional  # noqa:F401
from typing import Tuple  # noqa:F401

from netsemconv.ext import SockFamily
from netsemconv.internal.logger import get_logger

from ..extractor import REQUEST
from .getter import NetServerAttributesGetter


log = get_logger(__name__)

# A socket address as returned by ``socket.getpeername()`` / ``socket.getsockname()``:
# ``(host, port)`` for AF_INET, ``(host, port, flowinfo, scope_id)`` for AF_INET6 and
# a path for AF_UNIX.
SocketAddress = Any


def split_socket_address(address):
    # type: (SocketAddress) -> Tuple[Optional[str], Optional[int]]
    """Return the ``(address, port)`` pair of a socket address, either part may be None.

    >>> split_socket_address(("10.0.0.5", 54321))
    ('10.0.0.5', 54321)
    >>> split_socket_address("/run/app.sock")
    ('/run/app.sock', None)
    """
    if isinstance(address, (str, bytes)):
        path = os.fsdecode(address)
        # unnamed unix sockets report an empty path
        return (path or None), None
    if isinstance(address, tuple) and len(address) >= 2:
        host, port = address[0], address[1]
        if not isinstance(host, str):
            log.debug("ignoring socket address with non text host %r", address)
            return None, None
        if isinstance(port, bool) or not isinstance(port, int):
            port = None
        return host, port
    if address is not None:
        log.debug("ignoring unsupported socket address %r", address)
    return None, None


def ip_family(host):
    # type: (str) -> Optional[str]
    """Address family of an IP literal, None when ``host`` is not one (e.g. a host name)."""
    # scoped IPv6 literals, e.g. fe80::1%eth0
    host = host.split("%", 1)[0]
    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        return None
    return SockFamily.INET6.value if ip.version == 6 else SockFamily.INET.value


def sock_family_of(address):
    # type: (SocketAddress) -> Optional[str]
    """Address family of a socket address, None when it can't be told from the address alone."""
    if isinstance(address, (str, bytes)):
        return SockFamily.UNIX.value if address else None
    host, _ = split_socket_address(address)
    if host is None:
        return None
    return ip_family(host)


class InetSocketAddressNetServerAttributesGetter(NetServerAttributesGetter[REQUEST]):
    """Getter for requests that expose the Python socket addresses of their connection.

    Subclasses implement :meth:`get_peer_socket_address` and :meth:`get_host_socket_address`
    (typically ``sock.getpeername()`` and ``sock.getsockname()``) on top of the logical
    :meth:`transport`, :meth:`host_name` and :meth:`host_port`.
    """

    @abc.abstractmethod
    def get_peer_socket_address(self, request):
        # type: (REQUEST) -> Optional[SocketAddress]
        pass

    @abc.abstractmethod
    def get_host_socket_address(self, request):
        # type: (REQUEST) -> Optional[SocketAddress]
        pass

    def sock_family(self, request):
        # type: (REQUEST) -> Optional[str]
        address = self.get_peer_socket_address(request)
        if address is None:
            address = self.get_host_socket_address(request)
        return sock_family_of(address)

    def sock_peer_addr(self, request):
        # type: (REQUEST) -> Optional[str]
        return split_socket_address(self.get_peer_socket_address(request))[0]

    def sock_peer_port(self, request):
        # type: (REQUEST) -> Optional[int]
        return split_socket_address(self.get_peer_socket_address(request))[1]

    def sock_host_addr(self, request):
        # type: (REQUEST) -> Optional[str]
        return split_socket_address(self.get_host_socket_address(request))[0]

    def sock_host_port(self, request):
        # type: (REQUEST) -> Optional[int]
        return split_socket_address(self.get_host_socket_address(request))[1]
