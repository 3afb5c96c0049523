"""
Entry point for the Invoice Record Store
"""

import sys
import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from app import app
from config.settings import get_settings

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn
    port = get_settings().port
    logger.info(f"Starting Invoice Record Store on port {port}")
    uvicorn.run(app, host="0.0.0.0", port=port)
