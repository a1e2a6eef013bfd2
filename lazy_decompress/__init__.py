from .body_decompressor import BodyDecompressor, decompress_body
from .decompress_errors import DecompressError, DecompressValueError, DeflatePeekError, TruncatedStreamError
from .decompress_options import DecompressOptions
from .globals import init_logger
from .http_response import HttpResponse, decompress_requests_response
from .json_body import stream_json_dict
from .lazy_readers import BrotliReader, DeflateReader, GzipReader, PrefixedStream, ZlibDeflateReader, ZstdReader
from .output_logger import LogLevel
from .output_logger import OutputLogger
from .version import __version__

__all__ = [
    "BodyDecompressor",
    "BrotliReader",
    "DecompressError",
    "DecompressOptions",
    "DecompressValueError",
    "DeflatePeekError",
    "DeflateReader",
    "GzipReader",
    "HttpResponse",
    "LogLevel",
    "OutputLogger",
    "PrefixedStream",
    "TruncatedStreamError",
    "ZlibDeflateReader",
    "ZstdReader",
    "__version__",
    "decompress_body",
    "decompress_requests_response",
    "init_logger",
    "stream_json_dict",
]
