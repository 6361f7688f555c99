# enrollment_service/services/postal_lookup.py
"""
ViaCEP client: resolves a Brazilian postal code (CEP) to an address.
"""
import logging
from typing import Optional

import httpx

from enrollment_service.core.config import settings

logger = logging.getLogger(__name__)


class PostalLookupClient:
    """
    Thin synchronous wrapper around the ViaCEP JSON endpoint.

    The base URL is injected at construction so the service never reads
    configuration on its own.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def lookup(self, cep: str) -> Optional[dict]:
        """
        Fetch the ViaCEP record for a CEP.

        Returns the JSON payload, or None when the upstream answered with a
        non-200 status, a body that is not a JSON object, or flagged the CEP
        with `erro`.

        Raises:
            httpx.TimeoutException: upstream did not answer in time
            httpx.RequestError: upstream could not be reached
        """
        url = f"{self.base_url}/{cep}/json/"
        try:
            response = self._client.get(url)
        except httpx.RequestError as e:
            logger.warning(f"Postal lookup request to {url} failed: {e}")
            raise

        if response.status_code != httpx.codes.OK:
            logger.info(f"Postal lookup for CEP {cep} returned {response.status_code}")
            return None

        try:
            data = response.json()
        except ValueError:
            logger.warning(f"Postal lookup for CEP {cep} returned a non-JSON body")
            return None
        if not isinstance(data, dict):
            logger.warning(f"Postal lookup for CEP {cep} returned an unexpected payload")
            return None
        if data.get("erro"):
            logger.info(f"Postal lookup for CEP {cep} flagged as not found")
            return None

        return data

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "PostalLookupClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


# Process-wide client, shared by every request
_client: Optional[PostalLookupClient] = None


def get_postal_client() -> PostalLookupClient:
    """Get or create the postal lookup client singleton."""
    global _client
    if _client is None:
        _client = PostalLookupClient(
            base_url=settings.VIA_CEP_API,
            timeout=settings.VIA_CEP_TIMEOUT_SECONDS,
        )
    return _client


def close_postal_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
