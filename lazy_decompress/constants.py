class Const:
    CONTENT_ENCODING_HEADER = "Content-Encoding"
    CONTENT_LENGTH_HEADER = "Content-Length"

    ENCODING_GZIP = "gzip"
    ENCODING_BROTLI = "br"
    ENCODING_DEFLATE = "deflate"
    ENCODING_ZSTD = "zstd"
    SUPPORTED_ENCODINGS = [ENCODING_GZIP, ENCODING_BROTLI, ENCODING_DEFLATE, ENCODING_ZSTD]

    UNKNOWN_CONTENT_LENGTH = -1

    # zlib CMF byte for deflate with a 32K window, followed by the FLG bytes
    # produced by the four compression level presets
    ZLIB_METHOD_DEFLATE = 0x78
    ZLIB_LEVEL_DEFAULT = 0x9C
    ZLIB_LEVEL_LOW = 0x01
    ZLIB_LEVEL_MEDIUM = 0x5E
    ZLIB_LEVEL_BEST = 0xDA
    ZLIB_LEVELS = (ZLIB_LEVEL_DEFAULT, ZLIB_LEVEL_LOW, ZLIB_LEVEL_MEDIUM, ZLIB_LEVEL_BEST)
    ZLIB_HEADER_SIZE = 2
