"""Startup banner helpers: which URLs the storefront API can be reached on."""
import socket
from typing import List

LOOPBACK = ("127.0.0.1", "localhost")
# Any routable address works; connect() on a UDP socket sends nothing
_ROUTE_CHECK_ADDRESS = ("10.255.255.255", 1)


def get_local_ip() -> str:
    """LAN address of the outgoing interface, or 127.0.0.1 when there is no network."""
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        try:
            sock.connect(_ROUTE_CHECK_ADDRESS)
            return str(sock.getsockname()[0])
        except OSError:
            return LOOPBACK[0]


def server_urls(port: int) -> List[str]:
    """localhost URL first, then the LAN URL when the machine has one."""
    urls = [f"http://localhost:{port}"]
    lan_ip = get_local_ip()
    if lan_ip not in LOOPBACK:
        urls.append(f"http://{lan_ip}:{port}")
    return urls


__all__ = ["get_local_ip", "server_urls"]
