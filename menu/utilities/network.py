"""Network helper for startup messages: find the LAN address the planner is reachable on."""
import socket


def get_local_ip() -> str:
    """Return the address of the interface used for outbound traffic, or '127.0.0.1'.

    Connecting a UDP socket only selects a route; no packet is sent.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        return str(s.getsockname()[0])
    except OSError:
        return "127.0.0.1"
    finally:
        s.close()
