import logging
from typing import Optional

logger: logging.Logger = logging.getLogger("ddog")


def setup_logging(should_debug: Optional[bool] = None) -> None:
    # Records reach stderr through the root handler only
    logging.basicConfig(
        format="[%(asctime)s - %(name)s:%(lineno)d - %(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)
