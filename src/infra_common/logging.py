import logging
import sys

from pythonjsonlogger import jsonlogger


def setup_logging(level: int = logging.INFO):
    """
    Configures structured JSON logging for the application.

    Installs a JSON formatter that includes timestamp, level, logger name
    and message on a stdout stream handler, replacing any handlers already
    attached to the root logger. Library modules log through their own
    named loggers, so their records pick up this format once it is set.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    # gnsq logs every connection event at INFO
    logging.getLogger("gnsq").setLevel(logging.WARNING)

    return root_logger
