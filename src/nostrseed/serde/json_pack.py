"""Minimal compact JSON pack (list, str, int, bool, None) with JSON.stringify string escaping."""

from __future__ import annotations

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _join_surrogate_pairs(s: str) -> str:
    """Merge high/low surrogate code point pairs into one character; lone halves stay."""
    out = []
    i = 0
    n = len(s)
    while i < n:
        ch = s[i]
        if "\ud800" <= ch <= "\udbff" and i + 1 < n and "\udc00" <= s[i + 1] <= "\udfff":
            out.append(chr(0x10000 + ((ord(ch) - 0xD800) << 10) + (ord(s[i + 1]) - 0xDC00)))
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _json_pack_str(s: str, buf: list[str]) -> None:
    if any("\ud800" <= ch <= "\udfff" for ch in s):
        s = _join_surrogate_pairs(s)
    buf.append('"')
    for ch in s:
        esc = _ESCAPES.get(ch)
        if esc is not None:
            buf.append(esc)
        elif ch < " " or "\ud800" <= ch <= "\udfff":
            # control chars and lone surrogates
            buf.append(f"\\u{ord(ch):04x}")
        else:
            buf.append(ch)
    buf.append('"')


def _json_pack_obj(obj, buf: list[str]) -> None:
    if obj is None:
        buf.append("null")
    elif isinstance(obj, bool):
        buf.append("true" if obj else "false")
    elif isinstance(obj, int):
        buf.append(str(int(obj)))
    elif isinstance(obj, str):
        _json_pack_str(obj, buf)
    elif isinstance(obj, (list, tuple)):
        buf.append("[")
        for i, x in enumerate(obj):
            if i:
                buf.append(",")
            _json_pack_obj(x, buf)
        buf.append("]")
    else:
        raise TypeError(f"json pack: unsupported type {type(obj)}")


def json_pack(obj) -> bytes:
    """
    Serialize obj as compact JSON, UTF-8 encoded, no whitespace.

    Only the types that appear in a Nostr event commitment are supported;
    non-ASCII text is emitted verbatim.
    """
    buf: list[str] = []
    _json_pack_obj(obj, buf)
    return "".join(buf).encode("utf-8")


__all__: tuple[str, ...] = ("json_pack",)
