import os
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from a .env file

# Front-end origins allowed to call the API
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

# Identity used when a request does not name its caller
DEFAULT_USER_ID = int(os.getenv("DEFAULT_USER_ID", 1))
DEMO_USERNAME = os.getenv("DEMO_USERNAME", "demo")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
