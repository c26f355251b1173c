from typing import Optional  # noqa:F401
from typing import Tuple  # noqa:F401

from netsemconv.internal.logger import get_logger


log = get_logger(__name__)

DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443}


def parse_port(value, source):
    # type: (object, str) -> Optional[int]
    """Convert a port given as text (e.g. a WSGI environ value) to an int, None if it isn't one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        log.warning("unparseable %s %r", source, value)
        return None


def parse_host_header(value):
    # type: (str) -> Tuple[Optional[str], Optional[int]]
    """Split a ``Host`` header into host name and port. An empty host name is None.

    >>> parse_host_header("svc.internal:8080")
    ('svc.internal', 8080)
    >>> parse_host_header("[::1]:8443")
    ('::1', 8443)
    >>> parse_host_header(":8080")
    (None, 8080)
    """
    value = value.strip()
    if not value:
        return None, None
    if value.startswith("["):
        end = value.find("]")
        if end == -1:
            log.warning("unterminated IPv6 literal in host header %r", value)
            return None, None
        host, rest = value[1:end] or None, value[end + 1 :]
        if not rest:
            return host, None
        if not rest.startswith(":"):
            log.warning("unexpected characters after IPv6 literal in host header %r", value)
            return host, None
        return host, parse_port(rest[1:], "host header port")
    if value.count(":") == 1:
        host, _, port = value.partition(":")
        return host or None, (parse_port(port, "host header port") if port else None)
    return value, None


def host_from_header(header, scheme):
    # type: (Optional[str], Optional[str]) -> Tuple[Optional[str], Optional[int]]
    """Host name and port of a ``Host`` header, the port defaulting to the one of ``scheme``."""
    if header is None:
        return None, None
    host, port = parse_host_header(header)
    if host is not None and port is None:
        port = DEFAULT_PORTS.get(scheme or "http")
    return host, port
