
import logging
import os
import sys
import tempfile

LOGGER_NAME = "textfield_trans"
LOG_FILE_NAME = "TextFieldTrans.log"
LOG_FORMAT = "[%(asctime)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"

logger = logging.getLogger(LOGGER_NAME)


def default_log_path():
    """Documents folder if it exists, otherwise the temp directory."""
    documents = os.path.join(os.path.expanduser("~"), "Documents")
    if os.path.isdir(documents):
        return os.path.join(documents, LOG_FILE_NAME)
    return os.path.join(tempfile.gettempdir(), LOG_FILE_NAME)


def setup_logging(log_path=None, level=logging.INFO):
    """
    Attaches the append-only file handler and a console handler to the
    application logger. Returns the log file path, or None when the file
    could not be opened and only the console is logging.
    """
    log_path = log_path or default_log_path()
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console)
    logger.setLevel(level)

    try:
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    except OSError as e:
        print(f"Could not open log file '{log_path}': {e}")
        return None

    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    return log_path


def log(message):
    """Append one entry to the diagnostics log. Never raises."""
    try:
        logger.info(message)
    except Exception as e:
        print(f"Logging error: {e}")
