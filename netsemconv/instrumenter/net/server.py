from typing import TYPE_CHECKING
from typing import Iterable  # noqa:F401
from typing import Optional  # noqa:F401

from netsemconv.ext import net
from netsemconv.internal.logger import get_logger
from netsemconv.settings.net import config as net_config

from ..extractor import REQUEST
from ..extractor import RESPONSE
from ..extractor import AttributesExtractor
from ..extractor import internal_set
from .getter import NetServerAttributesGetter


if TYPE_CHECKING:  # pragma: no cover
    from opentelemetry.context import Context

    from ..attributes import AttributesBuilder


log = get_logger(__name__)


def _set_port(attributes, key, port):
    # type: (AttributesBuilder, str, Optional[int]) -> None
    if port is None:
        return
    if port > 0:
        attributes.set(key, port)
    else:
        log.debug("dropping non-positive %s: %r", key, port)


class NetServerAttributesExtractor(AttributesExtractor[REQUEST, RESPONSE]):
    """Extracts the network connection attributes of a server span.

    The logical host (``net.host.name``/``net.host.port``) is always reported when known.
    Socket level values are only reported when they add something: the socket host address
    and port are skipped when equal to the logical ones, and ``net.sock.family`` is skipped
    when no socket address was reported or when it is one of the default families
    (``inet`` unless configured otherwise through ``NETSEMCONV_DEFAULT_SOCK_FAMILIES``).

    Nothing is extracted when the span ends.
    """

    def __init__(self, getter, default_sock_families=None):
        # type: (NetServerAttributesGetter[REQUEST], Optional[Iterable[str]]) -> None
        self._getter = getter
        if default_sock_families is None:
            default_sock_families = net_config.default_sock_families
        self._default_sock_families = frozenset(default_sock_families)

    @classmethod
    def create(cls, getter, default_sock_families=None):
        # type: (NetServerAttributesGetter[REQUEST], Optional[Iterable[str]]) -> NetServerAttributesExtractor
        return cls(getter, default_sock_families=default_sock_families)

    @property
    def default_sock_families(self):
        return self._default_sock_families

    def on_start(self, attributes, parent_context, request):
        # type: (AttributesBuilder, Optional[Context], REQUEST) -> None
        getter = self._getter

        internal_set(attributes, net.TRANSPORT, getter.transport(request))

        set_sock_family = False

        sock_peer_addr = getter.sock_peer_addr(request)
        if sock_peer_addr is not None:
            set_sock_family = True
            attributes.set(net.SOCK_PEER_ADDR, sock_peer_addr)
            _set_port(attributes, net.SOCK_PEER_PORT, getter.sock_peer_port(request))

        host_name = getter.host_name(request)
        host_port = getter.host_port(request)
        if host_name is not None:
            attributes.set(net.HOST_NAME, host_name)
            _set_port(attributes, net.HOST_PORT, host_port)

        sock_host_addr = getter.sock_host_addr(request)
        if sock_host_addr is not None and sock_host_addr != host_name:
            set_sock_family = True
            attributes.set(net.SOCK_HOST_ADDR, sock_host_addr)
            sock_host_port = getter.sock_host_port(request)
            if sock_host_port != host_port:
                _set_port(attributes, net.SOCK_HOST_PORT, sock_host_port)

        if set_sock_family:
            sock_family = getter.sock_family(request)
            if sock_family is not None and sock_family not in self._default_sock_families:
                attributes.set(net.SOCK_FAMILY, sock_family)

    def on_end(self, attributes, context, request, response, error):
        # type: (AttributesBuilder, Optional[Context], REQUEST, Optional[RESPONSE], Optional[BaseException]) -> None
        pass
