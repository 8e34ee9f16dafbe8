
import logging

import httpx

from textfield_trans.errors import EmptyResponse, InvalidEndpoint, NetworkError

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def validate_endpoint(endpoint):
    """Return the endpoint as an httpx.URL, or raise InvalidEndpoint."""
    endpoint = (endpoint or "").strip()
    if not endpoint:
        raise InvalidEndpoint("API URL is empty, enter a valid URL in the settings window")

    try:
        url = httpx.URL(endpoint)
    except (httpx.InvalidURL, TypeError, ValueError):
        raise InvalidEndpoint(f"invalid API URL: {endpoint}") from None

    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidEndpoint(f"invalid API URL: {endpoint}")
    return url


class TranslationClient:
    def __init__(self, timeout=None, transport=None):
        # timeout=None waits for the endpoint indefinitely
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def translate(self, text, endpoint):
        """
        Posts the text as a single form field and returns the response body.
        The body is returned untrimmed so the server's formatting survives.
        """
        url = validate_endpoint(endpoint)

        try:
            response = await self.client.post(
                url,
                data={"text": text},
                headers={"Content-Type": FORM_CONTENT_TYPE},
            )
        except httpx.HTTPError as e:
            raise NetworkError(str(e) or e.__class__.__name__) from e

        logger.debug("Translation endpoint answered HTTP %s", response.status_code)

        try:
            body = response.content.decode("utf-8")
        except UnicodeDecodeError:
            raise EmptyResponse("translation response is not valid UTF-8") from None

        if not body.strip():
            raise EmptyResponse("translation response is empty")
        return body

    async def aclose(self):
        await self.client.aclose()
