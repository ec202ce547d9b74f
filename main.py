import logging
import os

import uvicorn

logger = logging.getLogger("chirpy")


def run() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8080"))
    logger.info("Starting server on %s:%d", host, port)
    uvicorn.run("chirpy.main:app", host=host, port=port, log_config=None)


if __name__ == "__main__":
    run()
