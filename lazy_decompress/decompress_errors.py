class DecompressError(Exception):
    pass


class DecompressValueError(DecompressError, ValueError):
    pass


class DeflatePeekError(DecompressError):
    """Raised in strict mode when the two byte zlib header of a deflate body cannot be read"""


class TruncatedStreamError(DecompressError, EOFError):
    def __init__(self, encoding: str):
        super().__init__(f"{encoding} stream ended before the end-of-stream marker was reached")
        self.encoding = encoding
