import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()

class Settings:
    # Geohash
    GEOHASH_PRECISION: int = int(os.getenv("GEOHASH_PRECISION", "9"))

    # Rate limiting (slowapi syntax)
    GEOCODING_RATE_LIMIT: str = os.getenv("GEOCODING_RATE_LIMIT", "120/minute")

    # CORS
    ALLOWED_ORIGINS: str = os.getenv("ALLOWED_ORIGINS", "")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    PORT: int = int(os.getenv("PORT", "8000"))

settings = Settings()
