"""
Network attributes of an ASGI ``http`` or ``websocket`` connection, read from its scope.

The peer and host sockets come from ``scope["client"]`` and ``scope["server"]``, the
logical host from the ``Host`` header. A server listening on a unix domain socket is
reported by servers such as uvicorn as ``(path, None)``.
"""
from typing import Any  # noqa:F401
from typing import Dict  # noqa:F401
from typing import Optional  # noqa:F401
from typing import Tuple  # noqa:F401

from netsemconv.ext import NetTransport
from netsemconv.instrumenter.net.inet import InetSocketAddressNetServerAttributesGetter
from netsemconv.internal.logger import get_logger

from ._utils import host_from_header


log = get_logger(__name__)

ASGIScope = Dict[str, Any]


def _host_header(scope):
    # type: (ASGIScope) -> Optional[str]
    for key, value in scope.get("headers") or ():
        if key.lower() == b"host":
            try:
                return value.decode("ascii")
            except UnicodeDecodeError:
                log.warning("failed to decode host header %r", value, exc_info=True)
                return None
    return None


def _is_unix_server(server):
    # type: (Any) -> bool
    return isinstance(server, (tuple, list)) and len(server) == 2 and server[1] is None


class ASGINetServerAttributesGetter(InetSocketAddressNetServerAttributesGetter[ASGIScope]):
    def _host(self, scope):
        # type: (ASGIScope) -> Tuple[Optional[str], Optional[int]]
        return host_from_header(_host_header(scope), scope.get("scheme"))

    def transport(self, scope):
        if _is_unix_server(scope.get("server")):
            return NetTransport.OTHER.value
        return NetTransport.IP_TCP.value

    def host_name(self, scope):
        return self._host(scope)[0]

    def host_port(self, scope):
        return self._host(scope)[1]

    def get_peer_socket_address(self, scope):
        client = scope.get("client")
        if isinstance(client, (tuple, list)) and len(client) == 2:
            return tuple(client)
        return None

    def get_host_socket_address(self, scope):
        server = scope.get("server")
        if _is_unix_server(server):
            return server[0]
        if isinstance(server, (tuple, list)) and len(server) == 2:
            return tuple(server)
        return None
