import logging
from pathlib import Path
from typing import Optional, Union

from ucapi_model import config


def get_logger(name: str, level: Optional[int] = None, log_dir: Union[str, Path, None] = None) -> logging.Logger:
    """Get a named logger with standard formatting.

    Example:
        logger = get_logger(__name__)
        logger.debug("built response for request %s", req_id)

    The level defaults to ``UCAPI_MODEL_LOG_LEVEL``. A file handler is only
    attached when a log directory is given or ``UCAPI_MODEL_LOG_DIR`` is set.

    Returns:
        logging.Logger: Configured logger instance.
    """
    if level is None:
        level = config.get_log_level()
    logger = logging.getLogger(name)

    # avoid adding duplicate handlers if called repeatedly (common in tests)
    if logger.handlers:
        logger.setLevel(level)
        return logger

    formatter = logging.Formatter(
        '%(asctime)s     || %(name)s \n%(levelname)s   || %(message)s \n',
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logs_dir = log_dir if log_dir is not None else config.LOG_DIR
    if logs_dir is not None:
        logs_dir = Path(logs_dir)
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            # stream handler is already attached
            logger.warning("cannot create log directory %s, logging to stream only", logs_dir)
        else:
            filehandler = logging.FileHandler(str(logs_dir / f"{name}.log"), encoding="utf-8")
            filehandler.setFormatter(formatter)
            logger.addHandler(filehandler)

    logger.setLevel(level)
    # stop passing records to the root logger (avoid duplicated messages)
    logger.propagate = False

    logger.debug("'%s' initialized with level %s", name, logging.getLevelName(level))
    return logger
