"""Reachability check for logship endpoints."""
import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

PROBE_TIMEOUT = 10.0  # seconds


def normalize_endpoint(endpoint: str) -> str:
    """Turn a bare host:port into an http:// URL."""
    endpoint = endpoint.strip().rstrip("/")
    if "://" not in endpoint:
        endpoint = f"http://{endpoint}"
    return endpoint


def check_endpoint(
    endpoint: str,
    timeout: float = PROBE_TIMEOUT,
    transport: Optional[httpx.BaseTransport] = None,
) -> tuple[bool, str]:
    """Probe endpoint with a GET. Returns (reachable, message)."""
    url = normalize_endpoint(endpoint)
    logger.debug(f"Probing {url}")
    try:
        with httpx.Client(timeout=timeout, transport=transport) as client:
            response = client.get(url)
    except httpx.ConnectError:
        return False, "Could not connect to server"
    except httpx.TimeoutException:
        return False, "Connection timed out"
    except httpx.HTTPError as e:
        logger.warning(f"Probe of {url} failed: {e}")
        return False, str(e)

    if response.status_code >= 500:
        return False, f"Server error: {response.status_code}"
    return True, f"Reachable (HTTP {response.status_code})"
