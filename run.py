"""Server run script."""

import uvicorn

from rift_trainer.api.config import settings
from rift_trainer.logging_config import setup_logging

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    uvicorn.run(
        "rift_trainer.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,
    )
