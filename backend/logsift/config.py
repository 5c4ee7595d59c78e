import os
from dotenv import load_dotenv

if not os.getenv("FLY_APP_NAME"):
    load_dotenv(override=False)

class Settings:
    GITHUB_TOKEN = os.getenv("GITHUB_TOKEN", "")
    RELEASES_REPO = os.getenv("RELEASES_REPO", "PrismLauncher/PrismLauncher")
    LAUNCHER_NAME = os.getenv("LAUNCHER_NAME", "Prism Launcher")
    REDIS_URL = os.getenv("REDIS_URL", "")
    DB_PATH = os.getenv("DB_PATH", "")
    CACHE_KEY = os.getenv("CACHE_KEY", "launcher-version-v1")
    CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", str(24 * 60 * 60)))
    MAX_LOG_BYTES = int(os.getenv("MAX_LOG_BYTES", "5000000"))
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "8000"))


settings = Settings()
