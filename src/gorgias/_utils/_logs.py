import logging
import sys

LOGGER_NAME = "gorgias"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logging(debug: bool = False) -> None:
    """Send SDK logs to stderr. Used by the CLI; libraries embedding the SDK
    should configure the ``gorgias`` logger themselves."""
    for handler in list(logger.handlers):
        if getattr(handler, "_gorgias_cli", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    handler._gorgias_cli = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
