"""
BotSense Main Application
- Serves the detection API.
"""

from fastapi import FastAPI

from botsense.apps.api.routes import router as detection_router
from botsense.core.error_handlers import register_error_handlers
from botsense.detection import detection_service
from botsense.logging_config import setup_logging

setup_logging()


app = FastAPI(
    title="BotSense",
    description="Rule based bot-likelihood detection API",
    version="0.1.0",
)

# Register error handlers
register_error_handlers(app)

app.include_router(detection_router)


@app.get("/api/health")
def health():
    """Liveness check with the number of active detectors"""
    return {"status": "ok", "detectors": len(detection_service.registry)}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
