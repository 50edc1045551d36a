import os

# Country selected when a form opens
DEFAULT_COUNTRY = os.getenv("DEFAULT_COUNTRY", "ID")

# Percentage fee seeded into a fresh form
DEFAULT_PERCENT_FEE = float(os.getenv("DEFAULT_PERCENT_FEE", "2"))

# API
CORS_ALLOW_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()
]

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# uvicorn bind address when the API module is run directly
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
