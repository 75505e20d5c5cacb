"""
Configuration for the view layer.
"""
import os

INVENTORY_API_URL = os.getenv("INVENTORY_API_URL", "http://inventory:8000")
TIMEOUT = float(os.getenv("API_TIMEOUT", "5.0"))  # seconds

NOTIFICATION_DURATION_MS = 3000
MAX_FIELD_LENGTH = 255
