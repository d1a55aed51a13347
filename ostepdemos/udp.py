"""Small helpers over UDP datagram sockets."""

import socket

__all__ = [
    "BUFFER_SIZE",
    "udp_open",
    "fill_sock_addr",
    "udp_write",
    "udp_read",
    "udp_close",
]

BUFFER_SIZE = 1000


def udp_open(port):
    """Create a UDP socket bound to ``port`` on every local interface."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.bind(("", port))
    except OSError:
        sock.close()
        raise
    return sock


def fill_sock_addr(hostname, port):
    """Resolve ``hostname`` to an ``(ip, port)`` address; None stays None."""
    if hostname is None:
        return None
    return socket.gethostbyname(hostname), port


def udp_write(sock, addr, buffer, n):
    """Send exactly ``n`` bytes of ``buffer`` to ``addr``, zero-padded if shorter."""
    if n < 0:
        raise ValueError(f"negative length: {n}")
    if isinstance(buffer, str):
        buffer = buffer.encode()
    data = bytes(buffer[:n]).ljust(n, b"\0")
    return sock.sendto(data, addr)


def udp_read(sock, n):
    """Receive one datagram of at most ``n`` bytes; return ``(data, sender)``."""
    return sock.recvfrom(n)


def udp_close(sock):
    sock.close()