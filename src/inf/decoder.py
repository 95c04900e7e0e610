import codecs
import logging

logger = logging.getLogger(__name__)

# Byte-order marks recognized at the start of a stream, mapped to the codec
# that decodes the rest of it. The "utf-16" codec reads and drops the BOM
# itself; "utf-8-sig" does the same for UTF-8.
_BOMS = (
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF8, "utf-8-sig"),
)
_DEFAULT_ENCODING = "utf-8"


class Decoder:
    """Incrementally decode the byte stream of a single INF file.

    The encoding is chosen from the first bytes of the stream: UTF-16LE when
    it starts with that byte-order mark, UTF-8 otherwise. Chunks may split
    multi-byte sequences anywhere; leftover bytes are carried over to the
    next call. Malformed input is replaced with U+FFFD and never raises.
    """

    def __init__(self) -> None:
        self._decoder: codecs.IncrementalDecoder | None = None
        self._head = b""
        self.encoding: str | None = None

    def decode(self, data: bytes, final: bool = False) -> str:
        if self._decoder is None:
            self._head += data

            if not final and self._maybe_bom(self._head):
                # Not enough bytes yet to tell.
                return ""

            self._decoder = self._detect(self._head)
            data, self._head = self._head, b""

        return self._decoder.decode(data, final)

    @staticmethod
    def _maybe_bom(head: bytes) -> bool:
        return any(
            len(head) < len(bom) and bom.startswith(head) for bom, _ in _BOMS
        )

    def _detect(self, head: bytes) -> codecs.IncrementalDecoder:
        for bom, encoding in _BOMS:
            if head.startswith(bom):
                break
        else:
            encoding = _DEFAULT_ENCODING

        logger.debug("decoding stream as %s", encoding)
        self.encoding = encoding
        return codecs.getincrementaldecoder(encoding)(errors="replace")
