"""
Network attributes of a WSGI request, read from its PEP 3333 ``environ``::

    from netsemconv.contrib.wsgi import WSGINetServerAttributesGetter
    from netsemconv.instrumenter import DictAttributesBuilder
    from netsemconv.instrumenter.net import NetServerAttributesExtractor

    extractor = NetServerAttributesExtractor.create(WSGINetServerAttributesGetter())


    def middleware(environ, start_response):
        attributes = DictAttributesBuilder()
        extractor.on_start(attributes, None, environ)
        ...
"""
from typing import Any  # noqa:F401
from typing import Dict  # noqa:F401
from typing import Optional  # noqa:F401
from typing import Tuple  # noqa:F401

from netsemconv.ext import NetTransport
from netsemconv.instrumenter.net.getter import NetServerAttributesGetter
from netsemconv.instrumenter.net.inet import ip_family

from ._utils import host_from_header
from ._utils import parse_port


WSGIEnviron = Dict[str, Any]


def _text(environ, key):
    # type: (WSGIEnviron, str) -> Optional[str]
    value = environ.get(key)
    if not value or not isinstance(value, str):
        return None
    return value


class WSGINetServerAttributesGetter(NetServerAttributesGetter[WSGIEnviron]):
    def transport(self, environ):
        return NetTransport.IP_TCP.value

    def _host(self, environ):
        # type: (WSGIEnviron) -> Tuple[Optional[str], Optional[int]]
        # https://peps.python.org/pep-3333/#url-reconstruction
        host, port = host_from_header(_text(environ, "HTTP_HOST"), environ.get("wsgi.url_scheme"))
        if host is None:
            return _text(environ, "SERVER_NAME"), parse_port(environ.get("SERVER_PORT"), "SERVER_PORT")
        return host, port

    def host_name(self, environ):
        return self._host(environ)[0]

    def host_port(self, environ):
        return self._host(environ)[1]

    def sock_family(self, environ):
        addr = _text(environ, "REMOTE_ADDR") or _text(environ, "SERVER_ADDR")
        if addr is None:
            return None
        return ip_family(addr)

    def sock_peer_addr(self, environ):
        return _text(environ, "REMOTE_ADDR")

    def sock_peer_port(self, environ):
        return parse_port(environ.get("REMOTE_PORT"), "REMOTE_PORT")

    # SERVER_ADDR is not part of PEP 3333, mod_wsgi and uWSGI set it
    def sock_host_addr(self, environ):
        return _text(environ, "SERVER_ADDR")
