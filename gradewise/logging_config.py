# gradewise/logging_config.py
import logging
import sys

from gradewise.settings import settings


def setup_logging():
    """
    Set up logging configuration for the application.
    """
    # Create a logger
    logger = logging.getLogger()
    logger.setLevel(settings.LOG_LEVEL)

    # Create a console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(settings.LOG_LEVEL)

    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(console_handler)

    # Chatty client libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)

    return logger


# Call the setup function to configure logging
app_logger = setup_logging()
