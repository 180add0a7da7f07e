"""IP address helpers."""

from __future__ import annotations

import ipaddress
import random
import socket
from collections.abc import Mapping, Sequence

_PRIVATE_NETWORKS = tuple(
    ipaddress.ip_network(net)
    for net in (
        "127.0.0.0/8",
        "::1/128",
        "10.0.0.0/8",
        "172.16.0.0/12",
        "192.168.0.0/16",
        "fc00::/7",
        "169.254.0.0/16",
        "fe80::/10",
    )
)

_FORWARD_HEADERS = ("X-Forwarded-For", "X-Real-IP", "X-Appengine-Remote-Addr")


def _parse(ip: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    if "%" in ip:
        return None
    try:
        addr = ipaddress.ip_address(ip)
    except ValueError:
        return None
    if isinstance(addr, ipaddress.IPv6Address) and addr.ipv4_mapped is not None:
        return addr.ipv4_mapped
    return addr


def _split_host_port(value: str) -> str | None:
    if value.startswith("["):
        end = value.find("]")
        if end < 0 or not value[end + 1 :].startswith(":"):
            return None
        return value[1:end]
    if value.count(":") != 1:
        return None
    return value.partition(":")[0]


def _header(headers: Mapping[str, str | Sequence[str]], key: str) -> str:
    wanted = key.lower()
    for name, value in headers.items():
        if name.lower() == wanted:
            if isinstance(value, str):
                return value
            return value[0] if value else ""
    return ""


def remote_addr(
    headers: Mapping[str, str | Sequence[str]] | None,
    remote_address: str = "",
    must_public: bool = False,
) -> str:
    """Return the client address from forwarding headers, else ``remote_address``.

    With ``must_public`` only public addresses from the headers are accepted.
    """
    for key in _FORWARD_HEADERS:
        value = _header(headers or {}, key)
        if not value:
            continue
        for item in value.split(","):
            item = item.strip()
            if ":" in item:
                host = _split_host_port(item)
                if host is None:
                    continue
                item = host
            if not must_public:
                return item
            try:
                if is_public(item):
                    return item
            except ValueError:
                continue
    return remote_address


def _is_private(addr: ipaddress.IPv4Address | ipaddress.IPv6Address) -> bool:
    return any(addr.version == net.version and addr in net for net in _PRIVATE_NETWORKS)


def local_addr() -> str:
    """Return a public IPv4 address of this host, or the address used for outgoing traffic."""
    try:
        candidates = socket.gethostbyname_ex(socket.gethostname())[2]
    except OSError:
        candidates = []
    for candidate in candidates:
        addr = _parse(candidate)
        if isinstance(addr, ipaddress.IPv4Address) and not _is_private(addr):
            return str(addr)
    for server in ("114.114.114.114", "8.8.8.8"):
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.connect((server, 53))
                return sock.getsockname()[0]
        except OSError:
            continue
    return ""


def is_private(ip: str) -> bool:
    """Return True for loopback, private and link-local addresses; raise ValueError when invalid."""
    addr = _parse(ip)
    if addr is None:
        raise ValueError(f"ipx: {ip} address is invalid")
    return _is_private(addr)


def is_public(ip: str) -> bool:
    """Return True for addresses that are not private; raise ValueError when invalid."""
    return not is_private(ip)


def number(ip: str) -> int:
    """Return an IPv4 address as an integer, or the top 32 bits of an IPv6 address."""
    addr = _parse(ip)
    if addr is None:
        raise ValueError(f"ipx: {ip} is invalid ip")
    if isinstance(addr, ipaddress.IPv4Address):
        return int(addr)
    return int(addr) >> 96


def random_ip() -> str:
    """Return a random IPv4 address."""
    return str(ipaddress.IPv4Address(random.getrandbits(32)))


def to_string(ip: int) -> str:
    """Return the dotted form of an IPv4 address given as an integer."""
    if ip < 0 or ip > 0xFFFFFFFF:
        raise ValueError(f"ipx: {ip} is not valid ipv4")
    return str(ipaddress.IPv4Address(ip))