"""Character encoders and decoders: pass-through UTF-8 and URL (form) encoding."""

import logging

_log = logging.getLogger(__name__)

UTF8 = "utf-8"
URLCODE = "UrlCode"

_UNRESERVED = frozenset(b"-_.~")


def _to_hex(nibble: int) -> str:
    return chr(nibble + 55 if nibble > 9 else nibble + 48)


def _from_hex(char: int) -> int:
    if ord("A") <= char <= ord("Z"):
        return char - ord("A") + 10
    if ord("a") <= char <= ord("z"):
        return char - ord("a") + 10
    if ord("0") <= char <= ord("9"):
        return char - ord("0")
    return 0


def encode(text: str, kind: str = UTF8) -> str:
    """Encode ``text`` with the named scheme; unknown schemes leave it unchanged."""
    if kind == UTF8:
        return text
    if kind == URLCODE:
        return url_encode(text)
    _log.warning("String not support encode this type: [%s]", kind)
    return text


def decode(text: str, kind: str = UTF8) -> str:
    """Decode ``text`` with the named scheme; unknown schemes leave it unchanged."""
    if kind == UTF8:
        return text
    if kind == URLCODE:
        return url_decode(text)
    _log.warning("String not support decode this type: [%s]", kind)
    return text


def url_encode(text: str) -> str:
    """Percent-encode the UTF-8 bytes of ``text``, turning spaces into ``+``."""
    parts = []
    for byte in text.encode("utf-8"):
        if (byte < 128 and chr(byte).isalnum()) or byte in _UNRESERVED:
            parts.append(chr(byte))
        elif byte == ord(" "):
            parts.append("+")
        else:
            parts.append("%" + _to_hex(byte >> 4) + _to_hex(byte % 16))
    return "".join(parts)


def url_decode(text: str) -> str:
    """Undo URL encoding; a truncated ``%`` escape ends the result."""
    data = text.encode("utf-8")
    out = bytearray()
    pos = 0
    while pos < len(data):
        byte = data[pos]
        if byte == ord("+"):
            out.append(ord(" "))
        elif byte == ord("%"):
            if pos + 2 >= len(data):
                break
            high = _from_hex(data[pos + 1])
            low = _from_hex(data[pos + 2])
            out.append((high * 16 + low) & 0xFF)
            pos += 2
        else:
            out.append(byte)
        pos += 1
    return out.decode("utf-8", errors="replace")