import abc
from typing import Generic
from typing import Optional  # noqa:F401

from ..extractor import REQUEST


class NetServerAttributesGetter(abc.ABC, Generic[REQUEST]):
    """Read-only access to the raw network facts of a server request.

    Every accessor may return None when the fact is not known. Ports are
    returned as they were observed; the extractor drops non-positive ones.
    """

    @abc.abstractmethod
    def transport(self, request):
        # type: (REQUEST) -> Optional[str]
        pass

    @abc.abstractmethod
    def host_name(self, request):
        # type: (REQUEST) -> Optional[str]
        pass

    @abc.abstractmethod
    def host_port(self, request):
        # type: (REQUEST) -> Optional[int]
        pass

    def sock_family(self, request):
        # type: (REQUEST) -> Optional[str]
        return None

    def sock_peer_addr(self, request):
        # type: (REQUEST) -> Optional[str]
        return None

    def sock_peer_port(self, request):
        # type: (REQUEST) -> Optional[int]
        return None

    def sock_host_addr(self, request):
        # type: (REQUEST) -> Optional[str]
        return None

    def sock_host_port(self, request):
        # type: (REQUEST) -> Optional[int]
        return None
