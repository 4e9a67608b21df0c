from typing import Any, Iterable, Optional, Protocol, runtime_checkable

from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict


@runtime_checkable
class ElementHandle(Protocol):
    """A single element of a parsed document."""

    def has_attr(self, key: str) -> bool:
        ...


@runtime_checkable
class DocumentHandle(Protocol):
    """
    Structural view of a parsed document.

    The auditor only needs to find elements by tag name and ask them about
    attributes; a ``bs4.BeautifulSoup`` tree satisfies this as-is.
    """

    def find_all(self, name: Any = None, *args: Any, **kwargs: Any) -> Iterable[ElementHandle]:
        ...


class Page(BaseModel):
    """
    A generated page handed to the auditor by the build pipeline.

    `url` is the report key. `title` and `document` are optional; rules that
    need them are skipped when they are missing. `src_ext` is the extension of
    the source file the page was rendered from.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    url: str
    title: Optional[str] = None
    document: Optional[DocumentHandle] = None
    src_ext: Optional[str] = None

    @classmethod
    def from_html(
            cls,
            url: str,
            html: str,
            title: Optional[str] = None,
            src_ext: Optional[str] = None
    ) -> "Page":
        """
        Builds a Page from raw HTML.

        When no title is given, the text of the document's <title> tag is used.
        """
        clean_html = html.replace('\ufeff', '').strip()
        soup = BeautifulSoup(clean_html, 'html.parser')

        if title is None and soup.title and soup.title.string:
            title = soup.title.string.strip() or None

        return cls(url=url, title=title, document=soup, src_ext=src_ext)
