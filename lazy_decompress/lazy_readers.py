import gzip
import zlib
from typing import Iterator, Optional

import brotli
import zstandard

from .constants import Const
from .decompress_errors import TruncatedStreamError
from .decompress_options import DEFAULT_READ_CHUNK_SIZE


class _LazyReader:
    """
    Wraps a compressed source stream and builds its decoder on the first read.

    Nothing touches the source until read() is called. The first exception
    raised while building or running the decoder is kept and raised again by
    every later read.
    """

    encoding = ""

    def __init__(self, source, chunk_size: int = DEFAULT_READ_CHUNK_SIZE):
        self._source = source
        self._chunk_size = chunk_size
        self._decoder = None
        self._error: Optional[Exception] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def source(self):
        return self._source

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    def read(self, size: Optional[int] = -1) -> bytes:
        if self._closed:
            raise ValueError("I/O operation on closed reader")
        if self._error is not None:
            raise self._error
        if size is None:
            size = -1
        try:
            if self._decoder is None:
                self._decoder = self._open_decoder()
            return self._read_decoded(size)
        except Exception as e:
            self._error = e
            raise

    def iter_chunks(self, chunk_size: Optional[int] = None) -> Iterator[bytes]:
        chunk_size = chunk_size or self._chunk_size
        while True:
            chunk = self.read(chunk_size)
            if not chunk:
                return
            yield chunk

    def close(self):
        if self._closed:
            return
        self._closed = True
        try:
            self._close_decoder()
        finally:
            self._source.close()

    def _open_decoder(self):
        raise NotImplementedError

    def _read_decoded(self, size: int) -> bytes:
        raise NotImplementedError

    def _close_decoder(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    def __repr__(self):
        return f"<{type(self).__name__} encoding={self.encoding!r} closed={self._closed}>"


class GzipReader(_LazyReader):
    encoding = Const.ENCODING_GZIP

    def _open_decoder(self):
        # GzipFile never closes a fileobj it was handed
        return gzip.GzipFile(fileobj=self._source, mode="rb")

    def _read_decoded(self, size: int) -> bytes:
        return self._decoder.read(size)

    def _close_decoder(self):
        if self._decoder is not None:
            self._decoder.close()


class _PushReader(_LazyReader):
    """
    Base for codecs that are fed compressed chunks and hand back whatever
    output they produced. Output beyond the requested size is held until the
    next read.
    """

    def __init__(self, source, chunk_size: int = DEFAULT_READ_CHUNK_SIZE):
        super().__init__(source, chunk_size)
        self._pending = b""
        self._exhausted = False
        self._fed_input = False

    def _read_decoded(self, size: int) -> bytes:
        if size < 0:
            chunks = [self._pending]
            self._pending = b""
            while not self._exhausted:
                chunks.append(self._fill())
            return b"".join(chunks)

        if size == 0:
            return b""
        while not self._pending and not self._exhausted:
            self._pending = self._fill()
        result = self._pending[:size]
        self._pending = self._pending[size:]
        return result

    def _fill(self) -> bytes:
        if self._is_finished():
            self._exhausted = True
            return self._flush()

        chunk = self._source.read(self._chunk_size)
        if not chunk:
            self._exhausted = True
            tail = self._flush()
            # an empty body decodes to an empty body
            if self._fed_input and not self._is_finished():
                raise TruncatedStreamError(self.encoding)
            return tail

        self._fed_input = True
        return self._decode(chunk)

    def _decode(self, chunk: bytes) -> bytes:
        raise NotImplementedError

    def _flush(self) -> bytes:
        return b""

    def _is_finished(self) -> bool:
        raise NotImplementedError


class BrotliReader(_PushReader):
    encoding = Const.ENCODING_BROTLI

    def _open_decoder(self):
        return brotli.Decompressor()

    def _decode(self, chunk: bytes) -> bytes:
        return self._decoder.process(chunk)

    def _is_finished(self) -> bool:
        return self._decoder.is_finished()


class _InflateReader(_PushReader):
    wbits = zlib.MAX_WBITS

    def _open_decoder(self):
        return zlib.decompressobj(self.wbits)

    def _decode(self, chunk: bytes) -> bytes:
        return self._decoder.decompress(chunk)

    def _flush(self) -> bytes:
        return self._decoder.flush()

    def _is_finished(self) -> bool:
        return self._decoder.eof


class ZlibDeflateReader(_InflateReader):
    """deflate data inside a zlib envelope; the two byte header and the adler32 trailer are checked by zlib"""

    encoding = Const.ENCODING_DEFLATE


class DeflateReader(_InflateReader):
    """raw deflate data with no envelope"""

    encoding = Const.ENCODING_DEFLATE
    wbits = -zlib.MAX_WBITS


class ZstdReader(_PushReader):
    encoding = Const.ENCODING_ZSTD

    def _open_decoder(self):
        return zstandard.ZstdDecompressor().decompressobj()

    def _decode(self, chunk: bytes) -> bytes:
        if self._decoder.eof:
            self._decoder = zstandard.ZstdDecompressor().decompressobj()
        parts = [self._decoder.decompress(chunk)]
        # a body may hold several concatenated frames
        while self._decoder.eof and self._decoder.unused_data:
            unused_data = self._decoder.unused_data
            self._decoder = zstandard.ZstdDecompressor().decompressobj()
            parts.append(self._decoder.decompress(unused_data))
        return b"".join(parts)

    def _fill(self) -> bytes:
        # frame boundaries are not the end of the body, only source EOF is
        chunk = self._source.read(self._chunk_size)
        if not chunk:
            self._exhausted = True
            if self._fed_input and not self._decoder.eof:
                raise TruncatedStreamError(self.encoding)
            return b""
        self._fed_input = True
        return self._decode(chunk)


class PrefixedStream:
    """Replays bytes already taken off a stream before reading on from it."""

    def __init__(self, prefix: bytes, source):
        self._prefix = prefix
        self._source = source
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def source(self):
        return self._source

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    def read(self, size: Optional[int] = -1) -> bytes:
        if self._closed:
            raise ValueError("I/O operation on closed stream")
        if size is None or size < 0:
            prefix, self._prefix = self._prefix, b""
            return prefix + self._source.read()
        if self._prefix:
            result = self._prefix[:size]
            self._prefix = self._prefix[size:]
            return result
        return self._source.read(size)

    def close(self):
        if self._closed:
            return
        self._closed = True
        self._source.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
