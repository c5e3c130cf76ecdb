import os
import uvicorn

def main():
    # Load settings first so the logger picks up the exported log directory
    from config import settings
    settings.setup_environment()

    os.makedirs(settings.USER_DATA_DIR, exist_ok=True)

    from main import app
    from utils.logger import get_logger

    logger = get_logger("server")
    logger.info(f"Starting Musicat on {settings.WEB_ADDR}:{settings.WEB_PORT}...")
    logger.info(f"Music directory: {settings.MUS_DIR}")

    uvicorn.run(app, host=settings.WEB_ADDR, port=settings.WEB_PORT, reload=False, workers=1)

if __name__ == "__main__":
    main()
