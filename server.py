# server.py
import logging

import uvicorn

from app.config import HOST, LOG_LEVEL, PORT

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server is running on port %d", PORT)
    uvicorn.run("app.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
