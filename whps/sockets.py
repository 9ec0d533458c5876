"""A thin TCP socket holder with the setup steps a server needs."""

import errno
import socket
from typing import Optional, Tuple

LISTEN_SIZE = 8192


class Socket:
    """Holds a TCP socket, or nothing when invalid or closed."""

    def __init__(self, sock: Optional[socket.socket] = None) -> None:
        self.sock = sock

    def _require(self) -> socket.socket:
        if self.sock is None:
            raise OSError(errno.EBADF, "socket is not valid")
        return self.sock

    def is_valid(self) -> bool:
        return self.sock is not None

    def create(self) -> socket.socket:
        """Create a new IPv4 stream socket and hold it."""
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        return self.sock

    def set_options(self) -> None:
        """Turn on keep-alive and disable Nagle's algorithm."""
        sock = self._require()
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)
        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)

    def set_nonblocking(self) -> None:
        self._require().setblocking(False)

    def bind(self, port: int, ip: Optional[str] = None) -> None:
        """Bind to ``port`` on ``ip``, or on every interface when ``ip`` is None."""
        self._require().bind((ip if ip is not None else "", port))

    def listen(self) -> None:
        self._require().listen(LISTEN_SIZE)

    def accept(self) -> Tuple["Socket", Tuple[str, int]]:
        """Accept one connection; return it wrapped, with the peer address."""
        conn, addr = self._require().accept()
        return Socket(conn), addr

    def set_reuse_addr(self) -> None:
        self._require().setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)

    def close(self) -> None:
        """Close the held socket; closing an invalid one does nothing."""
        if self.sock is not None:
            self.sock.close()
            self.sock = None

    def __enter__(self) -> "Socket":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()