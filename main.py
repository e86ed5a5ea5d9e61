import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.logging_config import setup_logging
from src.routers import ltti as ltti_router

# Configure logging VERY early
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="LTTI - LeToast Type Indicator API")

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allows all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)

# --- Include Routers ---
app.include_router(ltti_router.router, prefix="/api/v1", tags=["ltti"])


@app.get("/", tags=["Health Check"])
async def read_root():
    """
    Root endpoint for basic health check.
    """
    logger.info("Root endpoint '/' accessed")
    return {"status": "ok", "message": "LTTI engine is running."}


if __name__ == "__main__":
    import uvicorn
    # Better to run with `uvicorn main:app --reload` from the project root directory
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
