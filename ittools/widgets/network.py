"""Network helpers: IPv4 subnets and URL parsing."""

import ipaddress
from typing import Any
from urllib.parse import parse_qsl, urlsplit

from ittools.widgets.registry import WidgetInputError, manifest, require_str


@manifest.register(
    "IPv4 Subnet Calculator",
    category="Network",
    description="Network, broadcast, mask and host range for an IPv4 CIDR block.",
    route_path="/ipv4-subnet-calculator",
    icon="network",
)
def ipv4_subnet_calculator(params: dict[str, Any]) -> dict[str, Any]:
    cidr = require_str(params, "cidr").strip()
    try:
        network = ipaddress.IPv4Interface(cidr).network
    except ValueError as e:
        raise WidgetInputError(f"Invalid IPv4 CIDR: {cidr}") from e

    if network.prefixlen >= 31:
        # /31 and /32 have no network/broadcast reservation.
        first, last = network.network_address, network.broadcast_address
        usable = network.num_addresses
    else:
        first, last = network.network_address + 1, network.broadcast_address - 1
        usable = network.num_addresses - 2
    return {
        "network": str(network.network_address),
        "broadcast": str(network.broadcast_address),
        "netmask": str(network.netmask),
        "wildcard": str(network.hostmask),
        "prefix_length": network.prefixlen,
        "total_addresses": network.num_addresses,
        "usable_hosts": usable,
        "first_host": str(first),
        "last_host": str(last),
    }


@manifest.register(
    "Url Parser",
    category="Web",
    description="Split a URL into protocol, host, port, path, query and fragment.",
    route_path="/url-parser",
    icon="globe",
)
def url_parser(params: dict[str, Any]) -> dict[str, Any]:
    url = require_str(params, "url").strip()
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as e:
        raise WidgetInputError(f"Invalid URL: {e}") from e
    if not parts.scheme or not parts.netloc:
        raise WidgetInputError("URL must include a scheme and host (e.g. https://example.com)")
    return {
        "protocol": parts.scheme,
        "username": parts.username,
        "password": parts.password,
        "hostname": parts.hostname,
        "port": port,
        "path": parts.path,
        "query": parts.query,
        "params": [{"key": k, "value": v} for k, v in parse_qsl(parts.query, keep_blank_values=True)],
        "fragment": parts.fragment,
    }
