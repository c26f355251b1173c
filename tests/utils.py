import contextlib
import os
from typing import Dict  # noqa:F401
from typing import Optional  # noqa:F401

from netsemconv.instrumenter.net.getter import NetServerAttributesGetter


@contextlib.contextmanager
def override_env(env, replace_os_env=False):
    """
    Temporarily override ``os.environ`` with provided values::

        >>> with override_env(dict(NETSEMCONV_DEFAULT_SOCK_FAMILIES="inet,inet6")):
            # Your test
    """
    # Copy the full original environment
    original = dict(os.environ)

    # We allow callers to clear out the environment to prevent leaking variables into the test
    if replace_os_env:
        os.environ.clear()

    for k in list(os.environ.keys()):
        if k.startswith("NETSEMCONV_"):
            del os.environ[k]

    os.environ.update(env)
    try:
        yield
    finally:
        # Full clear the environment out and reset back to the original
        os.environ.clear()
        os.environ.update(original)


class DictNetServerAttributesGetter(NetServerAttributesGetter[Dict[str, object]]):
    """Getter over a plain dict of raw facts, keyed by accessor name. Missing keys are absent."""

    def transport(self, request):
        return request.get("transport")

    def host_name(self, request):
        return request.get("host_name")

    def host_port(self, request):
        return request.get("host_port")

    def sock_family(self, request):
        return request.get("sock_family")

    def sock_peer_addr(self, request):
        return request.get("sock_peer_addr")

    def sock_peer_port(self, request):
        return request.get("sock_peer_port")

    def sock_host_addr(self, request):
        return request.get("sock_host_addr")

    def sock_host_port(self, request):
        return request.get("sock_host_port")
