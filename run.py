"""
BotSense Main Application Entry Point
- Launches the detection API.
"""

import uvicorn

from botsense.config import settings

if __name__ == "__main__":
    print("🚀 Starting BotSense")
    print(f"📍 Server will run at http://{settings.HOST}:{settings.PORT}")
    print(f"📋 Application log level: {settings.LOG_LEVEL.upper()}")
    print(f"🛡️ Detector fail policy: fail-{settings.FAIL_POLICY}")

    # Note: Application logging is configured in botsense.main when the module loads
    # The log_level parameter here only controls uvicorn's own logging
    uvicorn.run(
        "botsense.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level="info" if settings.DEBUG else "warning",  # Controls uvicorn logs only
    )
