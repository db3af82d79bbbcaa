# Gash Terminal Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package logger for Gash."""
import logging

logger: logging.Logger = logging.getLogger("gash")
