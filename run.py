import subprocess
import os
from app.core.logging_config import get_logger, setup_logging

setup_logging()
logger = get_logger(__name__)

def run():
    port = os.getenv("PORT", "8000")
    logger.info("🚀 Starting Pantry Match API (Uvicorn)...")
    logger.info(f"   👉 API:  http://localhost:{port}")
    logger.info(f"   👉 Docs: http://localhost:{port}/docs")
    logger.info("Press Ctrl+C to stop.")

    backend = subprocess.Popen(["uvicorn", "app.main:app", "--reload", "--port", port])
    try:
        backend.wait()
    except KeyboardInterrupt:
        logger.info("🛑 Stopping API...")
        backend.terminate()
        logger.info("Done.")

if __name__ == "__main__":
    run()
