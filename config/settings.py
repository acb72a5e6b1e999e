import os
from pathlib import Path
from dotenv import load_dotenv

# Paths
PROJECT_ROOT = Path(__file__).parent.parent

# Load .env from project root
# Use stream for reliable unicode path support on Windows
_env_file = PROJECT_ROOT / ".env"
if _env_file.exists():
    with open(_env_file, "r", encoding="utf-8") as _f:
        load_dotenv(stream=_f, override=True)
else:
    load_dotenv()
DATA_DIR = PROJECT_ROOT / "data"
DB_PATH = Path(os.getenv("DB_PATH", str(DATA_DIR / "db" / "estoque.db")))

# Database
DB_TIMEOUT_SECONDS = float(os.getenv("DB_TIMEOUT_SECONDS", "30"))

# App
APP_PASSWORD = os.getenv("APP_PASSWORD", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Stock cache (seconds)
STOCK_CACHE_TTL_SECONDS = int(os.getenv("STOCK_CACHE_TTL_SECONDS", str(15 * 60)))

# Supported file types for import
SUPPORTED_FILE_TYPES = [".xls", ".xlsx"]
