#!/usr/bin/env python3
"""
paste.mozilla.org client.
"""

import re
import html
import requests
from typing import Dict, Optional

from .config import DEFAULT_USER_AGENT
from .exceptions import TokenNotFoundError
from .models import PasteRequest
from .logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30  # seconds per request
DEFAULT_MAX_REDIRECTS = 1024

CSRF_FIELD = "csrfmiddlewaretoken"

_INPUT_TAG_RE = re.compile(r"<input\b[^>]*>", re.IGNORECASE)
_ATTRIBUTE_RE = re.compile(
    r"""([^\s"'=<>/]+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'=<>`]+))"""
)


class PasteClient:
    """Uploads text to paste.mozilla.org through its HTML form."""

    BASE_URL = "https://paste.mozilla.org/"

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        """
        Initialize the paste client.

        Args:
            timeout: Timeout in seconds for each HTTP request
            max_redirects: Maximum number of redirects followed per request
            user_agent: User-Agent header sent with the form submission
        """
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.user_agent = user_agent

    def _create_session(self) -> requests.Session:
        """Create a session with its own cookie jar for a single upload."""
        session = requests.Session()
        session.max_redirects = self.max_redirects
        return session

    @staticmethod
    def extract_token(page_html: str) -> Optional[str]:
        """
        Find the anti-forgery token in the landing page.

        Args:
            page_html: HTML body of the landing page

        Returns:
            The value of the csrfmiddlewaretoken input, or None if absent
        """
        for tag in _INPUT_TAG_RE.finditer(page_html):
            attributes = {}
            for match in _ATTRIBUTE_RE.finditer(tag.group(0)):
                name, double, single, bare = match.groups()
                value = double if double is not None else single if single is not None else bare
                attributes.setdefault(name.lower(), value)
            if attributes.get("name") == CSRF_FIELD and "value" in attributes:
                return html.unescape(attributes["value"])
        return None

    def fetch_token(self, session: requests.Session) -> str:
        """
        Load the landing page and return its anti-forgery token.

        The token is only valid together with the cookies stored in
        ``session``.

        Raises:
            TokenNotFoundError: If the page has no token field
            requests.exceptions.RequestException: On transport or HTTP errors
        """
        try:
            response = session.get(self.BASE_URL, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Error loading {self.BASE_URL}: {str(e)}")
            raise

        token = self.extract_token(response.text)
        if not token:
            logger.error(f"No {CSRF_FIELD} found on {self.BASE_URL}")
            raise TokenNotFoundError(
                f"Could not find {CSRF_FIELD} on {self.BASE_URL}; "
                "the service is unavailable or its page format changed"
            )
        logger.debug("Fetched anti-forgery token")
        return token

    def build_form(self, token: str, request: PasteRequest) -> Dict[str, str]:
        """
        Build the form body of the paste submission.

        Args:
            token: Anti-forgery token from fetch_token
            request: The paste to submit

        Returns:
            Ordered mapping of the five form fields
        """
        return {
            CSRF_FIELD: token,
            "content": request.content,
            "expires": request.expires,
            "lexer": request.language,
            "title": "",
        }

    def submit(self, session: requests.Session, token: str, request: PasteRequest) -> str:
        """
        Post the paste and follow the redirects to its permanent URL.

        Returns:
            str: URL of the final response
        """
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "Referer": self.BASE_URL,
            "Origin": self.BASE_URL,
            "User-Agent": self.user_agent,
        }

        try:
            response = session.post(
                self.BASE_URL,
                data=self.build_form(token, request),
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Error submitting paste: {str(e)}")
            raise

        logger.debug(f"Paste submitted after {len(response.history)} redirect(s)")
        return response.url

    def upload(self, request: PasteRequest) -> str:
        """
        Upload a paste: fetch a token, then submit the form in the same session.

        Args:
            request: The paste to upload

        Returns:
            str: The shareable paste URL
        """
        session = self._create_session()
        try:
            token = self.fetch_token(session)
            url = self.submit(session, token, request)
        finally:
            session.close()

        logger.info(f"Created paste: {url}")
        return url
