"""Text processing utilities."""

from html.parser import HTMLParser

# Elements whose content is never text
_SKIPPED_TAGS = {"script", "style"}


class _TextExtractor(HTMLParser):
    """Collects character data, dropping every tag."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._parts: list[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _SKIPPED_TAGS:
            self._skip_depth += 1

    def handle_endtag(self, tag: str) -> None:
        if tag in _SKIPPED_TAGS and self._skip_depth:
            self._skip_depth -= 1

    def handle_data(self, data: str) -> None:
        if not self._skip_depth:
            self._parts.append(data)

    def get_result(self) -> str:
        return "".join(self._parts)


def strip_html(text: str) -> str:
    """
    Remove all markup from text.

    No element survives: tags are dropped, script and style bodies are
    discarded, and character references are unescaped.

    Args:
        text: Text possibly containing HTML

    Returns:
        Plain text
    """
    if not text:
        return ""

    parser = _TextExtractor()
    parser.feed(text)
    parser.close()
    return parser.get_result()


def flatten_newlines(text: str) -> str:
    """Replace every line feed with a single space."""
    return text.replace("\n", " ")
