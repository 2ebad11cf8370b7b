# logging_setup.py
import logging
import logging.handlers
import os
import sys
from config import LOG_CONFIG

def setup_logging():
    """Setup rotating file and console logging from LOG_CONFIG"""
    try:
        os.makedirs(LOG_CONFIG['dir'], exist_ok=True)

        formatter = logging.Formatter(LOG_CONFIG['format'])

        file_handler = logging.handlers.RotatingFileHandler(
            LOG_CONFIG['file'],
            maxBytes=LOG_CONFIG['max_size'],
            backupCount=LOG_CONFIG['backup_count'],
            mode='a',
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)

        logging.basicConfig(
            level=getattr(logging, LOG_CONFIG['level'], logging.INFO),
            handlers=[file_handler, console_handler],
            force=True  # Streamlit reruns the script, so reconfigure each time
        )

        # Errors also go to their own file
        error_handler = logging.handlers.RotatingFileHandler(
            LOG_CONFIG['error_file'],
            maxBytes=LOG_CONFIG['max_size'],
            backupCount=LOG_CONFIG['backup_count'],
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        logging.getLogger().addHandler(error_handler)

        # httpx logs every backend request at INFO
        logging.getLogger("httpx").setLevel(logging.WARNING)

        return True
    except OSError as e:
        # Fallback to console logging only
        logging.basicConfig(
            level=getattr(logging, LOG_CONFIG['level'], logging.INFO),
            format=LOG_CONFIG['format'],
            handlers=[logging.StreamHandler(sys.stdout)],
            encoding='utf-8',
            force=True
        )
        logging.getLogger(__name__).warning(f"Could not setup file logging: {e}")
        return False
