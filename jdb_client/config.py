# Configuration for the jdb client
import logging
import os

# Server settings
DEFAULT_ENDPOINT = os.getenv("JDB_ENDPOINT", "http://127.0.0.1:6001")
DEFAULT_CLIENT_ID = os.getenv("JDB_CLIENT_ID", "jdb-client")

# Request settings
DEFAULT_TIMEOUT = int(os.getenv("JDB_TIMEOUT", "1000"))  # milliseconds, socket and connect

# Option keys consumed by the client and never forwarded as query params
TIMEOUT_OPTION = "timeout"
ROOT_KEY_OPTION = "root-key"
RESERVED_OPTIONS = (TIMEOUT_OPTION, ROOT_KEY_OPTION)

# Logging settings
LOGGING_LEVEL = os.getenv("JDB_LOGGING_LEVEL", "INFO")
LOGGING_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level=None):
    """Set up root logging for scripts using the client. The library never calls this."""
    logging.basicConfig(level=level or LOGGING_LEVEL, format=LOGGING_FORMAT)
