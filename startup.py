"""
Startup script for deployment
Launches the uvicorn server on the port provided by the environment
"""

import sys

from core.config import settings


def main():
    """Main startup sequence"""
    print("=" * 60)
    print("Board Game Meetup Geo API - Startup")
    print("=" * 60)

    # Import and run uvicorn
    import uvicorn

    try:
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.PORT,
            log_level=settings.LOG_LEVEL.lower(),
            access_log=True
        )
    except KeyboardInterrupt:
        print("\nShutting down...")
        sys.exit(0)


if __name__ == "__main__":
    main()
