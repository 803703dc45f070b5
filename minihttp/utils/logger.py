import logging

__all__ = ["logger", "set_level"]


class CustomFormatter(logging.Formatter):
    """Colour the level name by severity"""

    GREY = '\033[90m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    RED = '\033[31m'
    WHITE = '\033[37m'
    RESET = '\033[0m'

    FORMAT = "%(asctime)s %(levelcolor)s%(levelname)s%(reset)s [%(threadName)s]: %(messagecolor)s%(message)s%(reset)s"

    FORMATS = {
        logging.DEBUG: FORMAT.replace('%(levelcolor)s', GREY).replace('%(messagecolor)s', WHITE),
        logging.INFO: FORMAT.replace('%(levelcolor)s', GREEN).replace('%(messagecolor)s', WHITE),
        logging.WARNING: FORMAT.replace('%(levelcolor)s', YELLOW).replace('%(messagecolor)s', WHITE),
        logging.ERROR: FORMAT.replace('%(levelcolor)s', RED).replace('%(messagecolor)s', WHITE),
        logging.CRITICAL: FORMAT.replace('%(levelcolor)s', RED).replace('%(messagecolor)s', WHITE),
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, self.FORMATS[logging.INFO])
        formatter = logging.Formatter(log_fmt, style='%')
        formatter.default_time_format = '%Y-%m-%d %H:%M:%S'
        formatter.default_msec_format = '%s.%03d'
        record.reset = self.RESET
        return formatter.format(record)


def setup_logger():
    """Set up the package logger"""
    logger = logging.getLogger("minihttp")
    logger.setLevel(logging.INFO)
    ch = logging.StreamHandler()
    ch.setFormatter(CustomFormatter())
    logger.addHandler(ch)
    return logger


def set_level(level):
    """Change the verbosity, `level` is a name such as "DEBUG" or a logging constant"""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)


logger = setup_logger()
