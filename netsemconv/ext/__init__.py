from enum import Enum
from enum import unique


class StrEnum(str, Enum):
    def __str__(self):
        return self.value


@unique
class NetTransport(StrEnum):
    IP_TCP = "ip_tcp"
    IP_UDP = "ip_udp"
    PIPE = "pipe"
    INPROC = "inproc"
    OTHER = "other"


@unique
class SockFamily(StrEnum):
    INET = "inet"
    INET6 = "inet6"
    UNIX = "unix"
