import subprocess
import time
import sys
import logging

from recipe_finder.core.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

def run():
    logger.info("🚀 Starting Recipe Finder...")

    # 1. Start Backend
    logger.info("➡️  Starting Backend API (Uvicorn)...")
    backend = subprocess.Popen(
        ["uvicorn", "recipe_finder.main:app", "--reload", "--port", "8000"],
        stdout=sys.stdout,
        stderr=sys.stderr
    )

    # Give the API a moment before the UI starts calling it
    time.sleep(2)

    # 2. Start Frontend
    logger.info("➡️  Starting Frontend UI (Streamlit)...")
    frontend = subprocess.Popen(
        ["streamlit", "run", "recipe_finder/frontend.py", "--server.port", "8501"],
        stdout=sys.stdout,
        stderr=sys.stderr
    )

    logger.info("✅ Recipe Finder is up! Access it here:")
    logger.info("   👉 UI:  http://localhost:8501")
    logger.info("   👉 API: http://localhost:8000")
    logger.info("Press Ctrl+C to stop everything.")

    try:
        backend.wait()
        frontend.wait()
    except KeyboardInterrupt:
        logger.info("🛑 Stopping application...")
        backend.terminate()
        frontend.terminate()
        logger.info("Done.")

if __name__ == "__main__":
    run()
