import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # Request-Logs von httpx/openai nur bei DEBUG
    if level.upper() != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
