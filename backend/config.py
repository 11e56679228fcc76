import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

HOST = os.getenv("TICTACTOE_HOST", "127.0.0.1")
PORT = int(os.getenv("TICTACTOE_PORT", "8000"))
LOG_LEVEL = os.getenv("TICTACTOE_LOG_LEVEL", "INFO").upper()

# Browser UI origins allowed through CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("TICTACTOE_CORS_ORIGINS", "http://localhost:5173,http://localhost").split(",")
    if origin.strip()
]
