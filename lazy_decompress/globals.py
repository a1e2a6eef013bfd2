from .decompress_options import DecompressOptions
from .output_logger import OutputLogger

LOGGER_NAME = "lazy_decompress"

logger = OutputLogger(LOGGER_NAME)


def init_logger(options: DecompressOptions):
    """Process wide logging setup, meant to be called once at startup"""
    global logger
    if options.custom_logger is not None:
        logger = options.custom_logger
    elif options.output_logger_level is not None:
        logger.set_log_level(options.output_logger_level)
    logger.set_disabled(options.disable_all_logging)
