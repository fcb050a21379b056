"""Read-only document snapshot with typed element queries.

Analyzers never touch BeautifulSoup directly; they ask the snapshot for
elements matching a CSS selector and read attributes through ``Element``.
"""

import re
from typing import Optional, Sequence
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup, Tag

_WHITESPACE = re.compile(r"[ \t\n\r\f]+")

# Set on each live <img> by the browser loader; value is its index in image_sizes.
IMAGE_INDEX_ATTRIBUTE = "data-wqa-index"

# Content a scripting browser never parses as elements.
INERT_CONTAINERS = "noscript, template"


class Element:
    """Handle on one element of a snapshot."""

    def __init__(self, tag: Tag, snapshot: "DocumentSnapshot"):
        self._tag = tag
        self._snapshot = snapshot

    def __repr__(self) -> str:
        return f"<Element {self.tag_name}>"

    @property
    def tag_name(self) -> str:
        """Upper-case tag name, as a browser reports it for HTML elements."""
        return self._tag.name.upper()

    def has_attribute(self, name: str) -> bool:
        return self._tag.has_attr(name)

    def get_attribute(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return value

    @property
    def id(self) -> str:
        return self.get_attribute("id") or ""

    @property
    def alt(self) -> str:
        return self.get_attribute("alt") or ""

    @property
    def src(self) -> str:
        """The ``src`` attribute resolved against the page URL."""
        raw = (self.get_attribute("src") or "").strip()
        if not raw:
            return ""
        if self._snapshot.url:
            return urljoin(self._snapshot.url, raw)
        return raw

    @property
    def natural_width(self) -> int:
        return self._snapshot.intrinsic_size(self._tag)[0]

    @property
    def natural_height(self) -> int:
        return self._snapshot.intrinsic_size(self._tag)[1]


def _stamped_index(tag: Tag) -> Optional[int]:
    value = tag.get(IMAGE_INDEX_ATTRIBUTE)
    if value is None or not value.strip().isdigit():
        return None
    return int(value)


class DocumentSnapshot:
    """A parsed document plus the environment it was captured in.

    Args:
        soup: Parsed document
        url: Location of the page; its hostname drives external-link checks
        image_sizes: Intrinsic ``(width, height)`` of each ``<img>`` as measured
            by a browser. Images stamped with ``data-wqa-index`` take the entry at
            that index; otherwise entries follow document order. Missing entries
            are 0x0.
    """

    def __init__(
        self,
        soup: BeautifulSoup,
        url: str = "",
        image_sizes: Optional[Sequence[tuple[int, int]]] = None,
    ):
        self._soup = soup
        self.url = url
        self._image_sizes: dict[int, tuple[int, int]] = {}

        sizes = list(image_sizes or [])
        images = soup.find_all("img")
        stamped = any(img.has_attr(IMAGE_INDEX_ATTRIBUTE) for img in images)
        for position, img in enumerate(images):
            if stamped:
                index = _stamped_index(img)
                if index is None:
                    continue
            else:
                index = position
            if index < len(sizes):
                width, height = sizes[index]
                self._image_sizes[id(img)] = (int(width), int(height))

    @classmethod
    def from_html(
        cls,
        html: str,
        url: str = "",
        image_sizes: Optional[Sequence[tuple[int, int]]] = None,
        rendered: bool = False,
    ) -> "DocumentSnapshot":
        """Parse markup into a snapshot.

        ``rendered`` marks markup serialized from a browser with scripting on;
        noscript and template content is dropped so only live elements remain.
        """
        # Keep every attribute a plain string so rel/class read like the DOM.
        soup = BeautifulSoup(html, "lxml", multi_valued_attributes=None)
        if rendered:
            for tag in soup.select(INERT_CONTAINERS):
                if not tag.decomposed:
                    tag.decompose()
        return cls(soup, url=url, image_sizes=image_sizes)

    @property
    def hostname(self) -> str:
        if not self.url:
            return ""
        return urlparse(self.url).hostname or ""

    @property
    def title(self) -> str:
        """Text of the first <title>, whitespace stripped and collapsed."""
        tag = self._soup.find("title")
        if tag is None:
            return ""
        return _WHITESPACE.sub(" ", tag.get_text()).strip(" \t\n\r\f")

    def select(self, selector: str) -> list[Element]:
        """All elements matching a CSS selector, in document order."""
        return [Element(tag, self) for tag in self._soup.select(selector)]

    def select_one(self, selector: str) -> Optional[Element]:
        tag = self._soup.select_one(selector)
        return Element(tag, self) if tag is not None else None

    def find_label_for(self, element_id: str) -> Optional[Element]:
        """The first <label> whose ``for`` attribute equals ``element_id``."""
        if not element_id:
            return None
        tag = self._soup.find("label", attrs={"for": element_id})
        return Element(tag, self) if tag is not None else None

    def intrinsic_size(self, tag: Tag) -> tuple[int, int]:
        return self._image_sizes.get(id(tag), (0, 0))
