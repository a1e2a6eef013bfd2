from typing import Optional

from . import globals
from .constants import Const
from .decompress_errors import DeflatePeekError
from .decompress_options import DecompressOptions
from .lazy_readers import BrotliReader, DeflateReader, GzipReader, PrefixedStream, ZlibDeflateReader, ZstdReader

_READERS = {
    Const.ENCODING_GZIP: GzipReader,
    Const.ENCODING_BROTLI: BrotliReader,
    Const.ENCODING_ZSTD: ZstdReader,
}


class BodyDecompressor:
    """
    Swaps a response body for a reader that decodes its Content-Encoding.

    The response is changed in place. Attaching a reader costs no I/O except
    for deflate bodies, where the first two bytes are read to tell a zlib
    envelope apart from raw deflate data.

    Logs go to options.custom_logger when set, otherwise to the package
    logger configured by init_logger().
    """

    def __init__(self, options: Optional[DecompressOptions] = None):
        self._options = options or DecompressOptions()

    @property
    def logger(self):
        if self._options.custom_logger is not None:
            return self._options.custom_logger
        return globals.logger

    def decompress(self, response) -> bool:
        """Returns True when a decoding reader was attached to the response body"""
        encoding = response.headers.get(Const.CONTENT_ENCODING_HEADER)
        if not self._options.is_enabled(encoding):
            return False

        if encoding == Const.ENCODING_DEFLATE:
            reader = self._select_deflate_reader(response)
        else:
            reader = _READERS[encoding](response.body, self._options.read_chunk_size)

        if reader is None:
            return False

        url = getattr(response, "url", None)
        if url:
            self._debug(f"Decoding {encoding} body of {url} with {type(reader).__name__}")
        else:
            self._debug(f"Decoding {encoding} body with {type(reader).__name__}")
        response.body = reader
        _mark_uncompressed(response)
        return True

    def _select_deflate_reader(self, response):
        header = self._peek_deflate_header(response.body)
        if header is None:
            return None

        response.body = PrefixedStream(header, response.body)
        if header[0] == Const.ZLIB_METHOD_DEFLATE and header[1] in Const.ZLIB_LEVELS:
            return ZlibDeflateReader(response.body, self._options.read_chunk_size)
        if header[0] == Const.ZLIB_METHOD_DEFLATE:
            return DeflateReader(response.body, self._options.read_chunk_size)

        self._info(
            f"deflate body starts with 0x{header[0]:02x}, not a zlib header, leaving it undecoded"
        )
        return None

    def _peek_deflate_header(self, body) -> Optional[bytes]:
        try:
            header = _read_exactly(body, Const.ZLIB_HEADER_SIZE)
        except Exception as e:
            if self._options.strict_deflate_peek:
                raise DeflatePeekError("Failed to read the zlib header of a deflate body") from e
            self._debug(f"Failed to read the zlib header of a deflate body: {type(e).__name__}: {e}")
            return None

        if len(header) < Const.ZLIB_HEADER_SIZE:
            if self._options.strict_deflate_peek:
                raise DeflatePeekError(
                    f"deflate body ended after {len(header)} byte(s), before its zlib header"
                )
            self._debug(f"deflate body ended after {len(header)} byte(s), leaving it undecoded")
            return None
        return header

    def _debug(self, msg):
        if not self._options.disable_all_logging:
            self.logger.debug(msg)

    def _info(self, msg):
        if not self._options.disable_all_logging:
            self.logger.info(msg)


def decompress_body(response, options: Optional[DecompressOptions] = None) -> bool:
    return BodyDecompressor(options).decompress(response)


def _read_exactly(stream, size: int) -> bytes:
    data = b""
    while len(data) < size:
        chunk = stream.read(size - len(data))
        if not chunk:
            break
        data += chunk
    return data


def _mark_uncompressed(response):
    # the decoded length is unknown until the body has been read through
    response.headers.pop(Const.CONTENT_ENCODING_HEADER, None)
    response.headers.pop(Const.CONTENT_LENGTH_HEADER, None)
    response.uncompressed = True
    response.content_length = Const.UNKNOWN_CONTENT_LENGTH
