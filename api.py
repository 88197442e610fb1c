import logging
import uvicorn
from config import ApplicationConfig
from src.api.app import create_app

logger = logging.getLogger(__name__)

app = create_app(ApplicationConfig)

if __name__ == "__main__":
    if ApplicationConfig.API_WORKERS > 1 and ApplicationConfig.CACHE_BACKEND == "memory":
        logger.warning("Principal cache is per process; set CACHE_BACKEND=redis when running several workers")

    uvicorn.run(
        "api:app",
        host=ApplicationConfig.API_HOST,
        port=int(ApplicationConfig.API_PORT),
        reload=ApplicationConfig.API_RELOAD,
        workers=None if ApplicationConfig.API_RELOAD else ApplicationConfig.API_WORKERS,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )
