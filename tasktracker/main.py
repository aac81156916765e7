"""
Main entry point for the task tracker service
"""

import asyncio
import uvicorn
from tasktracker.config.settings import settings
from tasktracker.utils.logger import logger


async def main():
    """Main entry point"""
    settings.validate()

    config = uvicorn.Config(
        "tasktracker.web.main:app",
        host=settings.WEB_HOST,
        port=settings.WEB_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    server = uvicorn.Server(config)

    logger.info(f"Starting task tracker on {settings.WEB_HOST}:{settings.WEB_PORT}")
    try:
        await server.serve()
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        raise
    logger.info("Task tracker stopped")


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
