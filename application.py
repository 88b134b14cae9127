# application.py
"""Server entry point for the Transfermarkt Squad API."""

import sys
import os
import logging
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(levelname)s: %(message)s'
)

# Ensure backend module is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

# Import the FastAPI app
from backend.api.main import app

# WSGI/ASGI hosts look for 'application'
application = app

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        application,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000"))
    )
