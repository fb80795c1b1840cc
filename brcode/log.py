from logging.handlers import RotatingFileHandler
from brcode.config import LOG_DIR, LOG_ARQUIVO, LOG_MAX_BYTES, LOG_BACKUPS
import os
import logging


def configurar_logging():
    logger = logging.getLogger()

    if getattr(logger, '_brcode_configurado', False):
        return logger

    if not os.path.exists(LOG_DIR):
        os.makedirs(LOG_DIR)

    logger.setLevel(logging.INFO)

    file_handler = RotatingFileHandler(
        LOG_ARQUIVO,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUPS
    )

    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(
        '[%(asctime)s] [%(levelname)s] - [%(message)s]'
    ))

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG)
    console.setFormatter(logging.Formatter(
        '%(levelname)s: %(message)s'
    ))

    logger.addHandler(file_handler)
    logger.addHandler(console)
    logger._brcode_configurado = True

    return logger
