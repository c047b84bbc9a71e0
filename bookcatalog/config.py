import os

# Catalog API settings
API_BASE_URL = os.environ.get("BOOKCATALOG_API_BASE_URL", "http://localhost:8000")
API_TIMEOUT = float(os.environ.get("BOOKCATALOG_API_TIMEOUT", "10.0"))

# Environment variable holding the signed-in user's id token
ID_TOKEN_ENV = "BOOKCATALOG_ID_TOKEN"
