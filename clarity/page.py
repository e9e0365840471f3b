# clarity/page.py
from dataclasses import dataclass, field
from functools import cached_property

from bs4 import BeautifulSoup
from bs4.element import PreformattedString

# Text under these tags never reaches the reader.
HIDDEN_TEXT_TAGS = {"script", "style", "noscript", "template"}


def extract_text(node) -> str:
    """Concatenated text of ``node`` without script/style contents or comments. Not stripped."""
    if node is None:
        return ""
    pieces = []
    for string in node.find_all(string=True):
        if isinstance(string, PreformattedString):
            continue
        if any(parent.name in HIDDEN_TEXT_TAGS for parent in string.parents):
            continue
        pieces.append(str(string))
    return "".join(pieces)


@dataclass
class ParsedPage:
    """A fetched document, parsed once and shared read-only by every analyzer."""

    url: str
    html: str
    final_url: str = ""
    status_code: int = 200
    soup: BeautifulSoup = field(default=None, repr=False)

    def __post_init__(self):
        if self.soup is None:
            self.soup = BeautifulSoup(self.html, 'html.parser')
        if not self.final_url:
            self.final_url = self.url

    @classmethod
    def from_html(cls, html: str, url: str = "https://example.com") -> "ParsedPage":
        return cls(url=url, html=html)

    @cached_property
    def body_text(self) -> str:
        body = self.soup.body
        return extract_text(body if body is not None else self.soup)

    @cached_property
    def document_text(self) -> str:
        return extract_text(self.soup)

    def select(self, selector: str) -> list:
        return self.soup.select(selector)

    def select_count(self, selector: str) -> int:
        return len(self.soup.select(selector))

    def first_text(self, selector: str) -> str:
        tag = self.soup.select_one(selector)
        return tag.get_text() if tag else ""

    def all_text(self, selector: str) -> str:
        return "".join(tag.get_text() for tag in self.soup.select(selector))
