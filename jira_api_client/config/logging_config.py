import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO):
    """Configure root logging for the command line tool."""
    logging.basicConfig(format=LOG_FORMAT, level=level)
    # urllib3 logs every connection at debug level
    logging.getLogger("urllib3").setLevel(logging.WARNING)
