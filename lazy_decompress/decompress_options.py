from typing import List, Optional

from .constants import Const
from .decompress_errors import DecompressValueError
from .output_logger import LogLevel, OutputLogger

DEFAULT_READ_CHUNK_SIZE = 16 * 1024


class DecompressOptions:
    """
    An object of properties for tuning how response bodies are decompressed
    All sizes are in bytes
    """

    def __init__(
            self,
            # only read by init_logger, the level is process wide
            output_logger_level: Optional[LogLevel] = LogLevel.WARNING,
            custom_logger: Optional[OutputLogger] = None,
            disable_all_logging: bool = False,
            # Raise DeflatePeekError instead of leaving a deflate body untouched
            # when its first two bytes cannot be read
            strict_deflate_peek: bool = False,
            read_chunk_size: int = DEFAULT_READ_CHUNK_SIZE,
            enabled_encodings: Optional[List[str]] = None,
    ):
        if isinstance(read_chunk_size, bool) or not isinstance(read_chunk_size, int) or read_chunk_size <= 0:
            raise DecompressValueError(
                "DecompressOptions.read_chunk_size must be a positive int"
            )
        if enabled_encodings is None:
            enabled_encodings = list(Const.SUPPORTED_ENCODINGS)
        else:
            unknown = [e for e in enabled_encodings if e not in Const.SUPPORTED_ENCODINGS]
            if len(unknown) > 0:
                raise DecompressValueError(
                    f"DecompressOptions.enabled_encodings contains unsupported encodings: {unknown}"
                )
        self.output_logger_level = output_logger_level
        self.custom_logger = custom_logger
        self.disable_all_logging = disable_all_logging
        self.strict_deflate_peek = strict_deflate_peek
        self.read_chunk_size = read_chunk_size
        self.enabled_encodings = list(enabled_encodings)

    def is_enabled(self, encoding: Optional[str]) -> bool:
        return encoding in self.enabled_encodings
