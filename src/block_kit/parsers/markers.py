# parsers/markers.py

"""UTF-8 byte accounting for block markers.

Offsets are counted as if the content were UTF-8 encoded:

- U+0000 - U+007F: 1 byte
- U+0080 - U+07FF: 2 bytes
- U+0800 - U+FFFF: 3 bytes, lone surrogates included
- U+10000 and above, or a high + low surrogate pair: 4 bytes

Combining sequences are not normalized; every code point counts on its own.
"""


def _is_high_surrogate(char: str) -> bool:
    return "\ud800" <= char <= "\udbff"


def _is_low_surrogate(char: str) -> bool:
    return "\udc00" <= char <= "\udfff"


def utf8_byte_length(text: str) -> int:
    try:
        return len(text.encode("utf-8"))
    except UnicodeEncodeError:
        pass

    # Surrogates present: count code point by code point
    total = 0
    index = 0
    while index < len(text):
        char = text[index]
        point = ord(char)
        if (
            _is_high_surrogate(char)
            and index + 1 < len(text)
            and _is_low_surrogate(text[index + 1])
        ):
            total += 4
            index += 2
            continue

        if point < 0x80:
            total += 1
        elif point < 0x800:
            total += 2
        elif point < 0x10000:
            total += 3
        else:
            total += 4
        index += 1
    return total


class MarkerTracker:
    """Running UTF-8 length of one block's content plus its child markers."""

    def __init__(self) -> None:
        self._byte_length = 0
        self._ends_with_high_surrogate = False
        self._markers: list[int] = []

    @property
    def byte_length(self) -> int:
        return self._byte_length

    @property
    def markers(self) -> tuple[int, ...]:
        return tuple(self._markers)

    def feed(self, text: str) -> None:
        if not text:
            return

        self._byte_length += utf8_byte_length(text)
        # A pair split across two runs encodes as 4 bytes, not 3 + 3
        if self._ends_with_high_surrogate and _is_low_surrogate(text[0]):
            self._byte_length -= 2
        self._ends_with_high_surrogate = _is_high_surrogate(text[-1])

    def mark(self) -> int:
        self._markers.append(self._byte_length)
        return self._byte_length
