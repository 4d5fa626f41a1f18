"""Validation of advertised peer address lists."""

import ipaddress
from dataclasses import dataclass
from typing import Optional, Tuple

from .util import now


@dataclass(frozen=True)
class Address:
    """An IPv4 address as a 32-bit integer plus a port."""

    ip: int
    port: int


@dataclass(frozen=True)
class AddressList:
    """A peer's advertised address with its validity dates."""

    address: Optional[Address]
    version: int = 0
    reinit_date: int = 0
    priority: int = 0
    expire_at: int = 0


class AddressListError(ValueError):
    """Raised when an address list cannot be used."""

    LIST_IS_EMPTY = "Address list is empty"
    TOO_NEW_VERSION = "Address list version is too new"
    EXPIRED = "Address list is expired"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def parse_address_list(address_list: AddressList, clock_tolerance: int) -> Tuple[str, int]:
    """Validate the list and return its socket address as ``(host, port)``."""
    address = address_list.address
    if address is None:
        raise AddressListError(AddressListError.LIST_IS_EMPTY)

    version = now()
    if address_list.reinit_date > version + clock_tolerance:
        raise AddressListError(AddressListError.TOO_NEW_VERSION)

    if address_list.expire_at != 0 and address_list.expire_at < version:
        raise AddressListError(AddressListError.EXPIRED)

    host = str(ipaddress.IPv4Address(address.ip & 0xFFFFFFFF))
    return host, address.port & 0xFFFF