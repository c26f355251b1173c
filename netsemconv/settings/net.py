from typing import FrozenSet  # noqa:F401

from envier import En

from netsemconv.ext.net import SOCK_FAMILY_INET


def parse_sock_families(value):
    # type: (str) -> FrozenSet[str]
    """Parse a comma separated list of address family tokens, e.g. ``inet,inet6``."""
    return frozenset(token.strip() for token in value.split(","))


def _validate_sock_families(value):
    # type: (FrozenSet[str]) -> None
    if not value or "" in value:
        raise ValueError("value must be a comma separated list of non-empty address family tokens")


class NetAttributesConfig(En):
    __prefix__ = "netsemconv"

    default_sock_families = En.v(
        frozenset,
        "default_sock_families",
        parser=parse_sock_families,
        validator=_validate_sock_families,
        default=frozenset((SOCK_FAMILY_INET,)),
        help_type="List",
        help="Address families considered implicit. A net.sock.family attribute carrying one of these "
        "values is not emitted.",
    )


config = NetAttributesConfig()
