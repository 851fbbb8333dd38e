import logging  # NOQA

LOGGER_NAME = 'mst'
LOGGING_FORMAT = '%(levelname)-6s %(asctime)s [%(filename)18s:%(lineno)3d] %(message)s'
LOGGING_LEVEL = logging.INFO


def get_formatter():
    return logging.Formatter(LOGGING_FORMAT)


def reset_logging():
    logger = logging.getLogger(LOGGER_NAME)
    handlers = logger.handlers[:]
    for handler in handlers:
        logger.removeHandler(handler)
        handler.flush()
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logger.handlers.clear()


def init_logger(level=LOGGING_LEVEL):
    reset_logging()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    formatter = get_formatter()
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    logger.addHandler(handler)
