"""Local network address helpers for the controller server.

Used at startup to print URLs a phone on the same WiFi can open.
Interface data comes from psutil.net_if_addrs(), which maps an interface
name to a list of address records (family, address, netmask, ...).
"""
import ipaddress
import socket

import psutil


def _is_internal(address: str) -> bool:
    try:
        return ipaddress.ip_address(address).is_loopback
    except ValueError:
        return False


def get_local_ips(interfaces=None) -> list[str]:
    """Return the non-internal IPv4 addresses of the local interfaces.

    `interfaces` defaults to the live table from psutil; tests can pass
    their own {name: [record, ...]} mapping.
    """
    if interfaces is None:
        interfaces = psutil.net_if_addrs()
    ips = []
    for addrs in interfaces.values():
        for addr in addrs:
            if addr.family == socket.AF_INET and not _is_internal(addr.address):
                ips.append(addr.address)
    return ips


def network_urls(port: int, ips=None, scheme: str = 'http') -> list[str]:
    if ips is None:
        ips = get_local_ips()
    return [f"{scheme}://{ip}:{port}" for ip in ips]
