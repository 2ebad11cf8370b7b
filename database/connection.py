# database/connection.py

"""Backend connection management"""

import logging
import httpx
from postgrest.exceptions import APIError
from supabase import create_client, Client

from config import SUPABASE_CONFIG

logger = logging.getLogger(__name__)

_client = None

# Query failures and transport failures (refused connections, timeouts)
BACKEND_ERRORS = (APIError, httpx.HTTPError)


def get_client() -> Client:
    """
    Get the shared Supabase client, creating it on first use

    Returns:
        supabase.Client: Client bound to SUPABASE_URL / SUPABASE_KEY

    Raises:
        RuntimeError: If the backend credentials are not configured
    """
    global _client
    if _client is None:
        url = SUPABASE_CONFIG["url"]
        key = SUPABASE_CONFIG["key"]
        if not url or not key:
            raise RuntimeError("SUPABASE_URL and SUPABASE_KEY must be set in the environment (or .env)")
        _client = create_client(url, key)
        logger.info("Supabase client created")
    return _client


def set_client(client):
    """
    Replace the shared client (pass None to force re-creation)

    Args:
        client: Object exposing the supabase query builder interface
    """
    global _client
    _client = client


def response_data(response, default=None):
    """
    Extract the data from a query response

    maybe_single() queries return no response object at all when nothing
    matched, so None is accepted here.

    Args:
        response: APIResponse or None
        default: Value returned when there is no data

    Returns:
        The response rows (or row), or default
    """
    if response is None or response.data is None:
        return default
    return response.data


def error_message(error):
    """Readable message for any of BACKEND_ERRORS"""
    return getattr(error, "message", None) or str(error) or type(error).__name__
