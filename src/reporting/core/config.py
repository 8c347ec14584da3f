import os

# In a real deployment, load from environment variables or a config file
DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite://./reporting.sqlite3")

# Links in report responses are built from this base, e.g. "<base>/reporting?limit=10&page=2"
REPORT_BASE_URL: str = os.getenv("REPORT_BASE_URL", "http://localhost:3000/api/v1").rstrip("/")

DEFAULT_LIMIT: int = int(os.getenv("REPORT_DEFAULT_LIMIT", "10"))
DEFAULT_PAGE: int = 1

# Example of other potential configurations:
# DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() in ("true", "1", "t")
