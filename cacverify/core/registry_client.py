"""
HTTP client for the CAC public business-name search.
"""
from typing import Dict, Optional

import httpx
from bs4 import BeautifulSoup, ParserRejectedMarkup
from loguru import logger

from cacverify.core.exceptions import RegistryNetworkError


ACCEPT_HTML = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"
CSRF_FORM_FIELD = "_token"
CSRF_HEADER = "X-CSRF-TOKEN"


def extract_csrf_token(html: str) -> Optional[str]:
    """Find the anti-forgery token on the search landing page.

    Looks at ``<meta name="csrf-token">`` first, then at a hidden
    ``<input name="_token">``.

    Args:
        html: Landing page markup

    Returns:
        Token value, or None when the page carries none or cannot be parsed
    """
    try:
        soup = BeautifulSoup(html or "", "html.parser")
    except ParserRejectedMarkup as e:
        logger.warning(f"Landing page markup rejected by parser: {e}")
        return None

    meta_tag = soup.select_one('meta[name="csrf-token"]')
    if meta_tag is not None and meta_tag.get("content"):
        return meta_tag["content"]

    input_tag = soup.select_one(f'input[name="{CSRF_FORM_FIELD}"]')
    if input_tag is not None and input_tag.get("value"):
        return input_tag["value"]

    return None


class RegistrySearchClient:
    """Client for the registry's GET-then-POST search workflow."""

    def __init__(
        self,
        base_url: str,
        search_path: str = "/search",
        search_field: str = "search_term",
        user_agent: str = "Mozilla/5.0",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize registry client.

        Args:
            base_url: Search landing page URL
            search_path: Path appended to ``base_url`` for the form submission
            search_field: Form field carrying the business name
            user_agent: Browser-like user agent sent with both requests
            timeout: Timeout in seconds applied to each request
            transport: Optional httpx transport (tests inject a mock here)
        """
        self.base_url = base_url
        self.search_url = base_url.rstrip("/") + search_path
        self.search_field = search_field
        self.user_agent = user_agent
        self.timeout = httpx.Timeout(timeout)
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": ACCEPT_HTML,
        }

    async def search(self, business_name: str) -> str:
        """Submit a business-name search and return the results markup.

        Both requests share one client so session cookies set by the
        landing page accompany the form submission.

        Args:
            business_name: Name to search for

        Returns:
            Response body of the search submission

        Raises:
            RegistryNetworkError: On transport failure, timeout, a non-2xx
                landing page or a non-200 search response
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                landing = await client.get(
                    self.base_url,
                    headers=self._headers(),
                    follow_redirects=True,
                )
                landing.raise_for_status()

                csrf_token = extract_csrf_token(landing.text)
                logger.debug(f"CSRF token: {'found' if csrf_token else 'not found'}")

                headers = self._headers()
                headers["Referer"] = self.base_url
                form = {self.search_field: business_name}
                if csrf_token:
                    headers[CSRF_HEADER] = csrf_token
                    form[CSRF_FORM_FIELD] = csrf_token

                response = await client.post(self.search_url, data=form, headers=headers)
        except httpx.HTTPStatusError as e:
            raise RegistryNetworkError(
                f"Registry landing page returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise RegistryNetworkError(f"Registry request failed: {e!r}") from e

        logger.debug(f"Search response status: {response.status_code}")
        if response.status_code != 200:
            raise RegistryNetworkError(
                f"Registry search returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        return response.text
