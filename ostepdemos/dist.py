"""A UDP client that says hello and a server that answers goodbye."""

import sys

from .udp import BUFFER_SIZE, fill_sock_addr, udp_close, udp_open, udp_read, udp_write

__all__ = ["SERVER_PORT", "CLIENT_PORT", "run_client", "serve", "client_main", "server_main"]

SERVER_PORT = 10000
CLIENT_PORT = 20000


def _text(data):
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def run_client(host="localhost", port=SERVER_PORT, local_port=CLIENT_PORT, out=None):
    """Send "hello world" to the server, wait for its reply and return the reply text."""
    out = sys.stdout if out is None else out
    sock = udp_open(local_port)
    try:
        addr = fill_sock_addr(host, port)
        message = "hello world"
        print(f"client:: send message [{message}]", file=out)
        try:
            udp_write(sock, addr, message, BUFFER_SIZE)
        except OSError:
            print("client:: failed to send", file=out)
            raise
        print("client:: wait for reply...", file=out)
        data, _ = udp_read(sock, BUFFER_SIZE)
        reply = _text(data)
        print(f"client:: got reply [size:{len(data)} contents:({reply})", file=out)
        return reply
    finally:
        udp_close(sock)


def serve(port=SERVER_PORT, out=None, max_messages=None):
    """Answer each datagram with "goodbye world"; return the number of messages read."""
    out = sys.stdout if out is None else out
    sock = udp_open(port)
    handled = 0
    try:
        while max_messages is None or handled < max_messages:
            print("server:: waiting...", file=out)
            data, addr = udp_read(sock, BUFFER_SIZE)
            print(
                f"server:: read message [size:{len(data)} contents:({_text(data)})]",
                file=out,
            )
            handled += 1
            if data:
                udp_write(sock, addr, "goodbye world", BUFFER_SIZE)
                print("server:: reply", file=out)
    finally:
        udp_close(sock)
    return handled


def client_main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 2:
        print("usage: client [host [port]]", file=sys.stderr)
        return 1
    host = args[0] if args else "localhost"
    try:
        port = int(args[1]) if len(args) > 1 else SERVER_PORT
        run_client(host, port)
    except (OSError, ValueError) as exc:
        print(f"client:: {exc}", file=sys.stderr)
        return 1
    return 0


def server_main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        print("usage: server [port]", file=sys.stderr)
        return 1
    try:
        port = int(args[0]) if args else SERVER_PORT
        serve(port)
    except (OSError, ValueError) as exc:
        print(f"server:: {exc}", file=sys.stderr)
        return 1
    return 0