# clarity/base_module.py
import logging
from abc import ABC, abstractmethod

import requests
from bs4 import BeautifulSoup

from .config import DEFAULT_USER_AGENT
from .errors import FetchError
from .page import ParsedPage

logger = logging.getLogger(__name__)


class AuditModule(ABC):
    """
    Abstract base class for all audit modules.
    Each module inspects an already parsed page and returns a plain dict.
    """

    def __init__(self, config=None):
        self.module_name = self.__class__.__name__
        self.config = config if config else {}
        self.global_config = self.config.get("Global", {})

    @abstractmethod
    def analyze(self, page: ParsedPage) -> dict:
        """
        Analyzes the parsed page for the aspects this module covers.

        Args:
            page (ParsedPage): The fetched and parsed document. Must not be mutated.

        Returns:
            dict: Results for this module, including a 0-100 ``score``.
        """

    def get_module_name(self) -> str:
        """Returns the name of the module."""
        return self.module_name


def build_session(global_config: dict | None = None) -> requests.Session:
    global_config = global_config or {}
    session = requests.Session()
    session.headers.update({
        'User-Agent': global_config.get("user_agent", DEFAULT_USER_AGENT),
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        'Accept-Language': global_config.get("accept_language", "en-US,en;q=0.8"),
    })
    return session


class PageFetcher:
    """Fetches one URL (single attempt, redirects followed) and parses it."""

    def __init__(self, global_config: dict | None = None, session: requests.Session | None = None):
        self.global_config = global_config or {}
        self.session = session if session is not None else build_session(self.global_config)

    def fetch(self, url: str) -> ParsedPage:
        timeout = self.global_config.get("request_timeout", 10)
        try:
            resp = self.session.get(url, timeout=timeout, allow_redirects=True)
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            logger.warning("Timed out fetching %s after %ss", url, timeout)
            raise FetchError(url, "timeout", str(e)) from e
        except requests.exceptions.ConnectionError as e:
            logger.warning("Could not connect to %s: %s", url, e)
            raise FetchError(url, "not_found", str(e)) from e
        except requests.exceptions.HTTPError as e:
            logger.warning("HTTP error fetching %s: %s", url, e)
            raise FetchError(url, "http_error", str(e)) from e
        except requests.exceptions.RequestException as e:
            logger.warning("Request error fetching %s: %s", url, e)
            raise FetchError(url, "request_error", str(e)) from e

        logger.debug("Fetched %s (%s, %d bytes)", resp.url, resp.status_code, len(resp.content))
        return ParsedPage(
            url=url,
            html=resp.text,
            final_url=resp.url or url,
            status_code=resp.status_code,
            soup=BeautifulSoup(resp.content, 'html.parser'),
        )
