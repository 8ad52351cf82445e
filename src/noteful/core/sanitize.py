"""
HTML sanitization policies for user supplied text.

Two explicit policies are used instead of bleach's defaults:

- ``ESCAPE_ALL`` for folder and note names: no markup survives, every tag is
  escaped to entities (``<script>`` becomes ``&lt;script&gt;``).
- ``INLINE_MARKUP`` for note content: a small set of inline tags is kept with
  a per-tag attribute allow-list, anything else (``script``, ``on*`` event
  handlers, ``style``...) is removed while the surrounding text is kept.

Both policies are idempotent, so text cleaned on write can safely be cleaned
again on read.
"""

from typing import Dict, FrozenSet, Iterable, Mapping, Optional

from bleach.sanitizer import Cleaner


class SanitizePolicy:
    """An allow-list of tags, attributes and URL protocols."""

    def __init__(
        self,
        name: str,
        tags: Iterable[str] = (),
        attributes: Optional[Mapping[str, Iterable[str]]] = None,
        protocols: Iterable[str] = ("http", "https", "mailto"),
        strip: bool = False,
    ):
        self.name = name
        self.tags: FrozenSet[str] = frozenset(tags)
        self.attributes: Dict[str, FrozenSet[str]] = {
            tag: frozenset(attrs) for tag, attrs in (attributes or {}).items()
        }
        self.protocols: FrozenSet[str] = frozenset(protocols)
        self.strip = strip

        unknown = set(self.attributes) - self.tags
        if unknown:
            raise ValueError(f"Attributes declared for tags not in the allow-list: {sorted(unknown)}")

        self._cleaner = Cleaner(
            tags=self.tags,
            attributes={tag: sorted(attrs) for tag, attrs in self.attributes.items()},
            protocols=self.protocols,
            strip=self.strip,
            strip_comments=True,
        )

    def allows_tag(self, tag: str) -> bool:
        return tag.lower() in self.tags

    def allows_attribute(self, tag: str, attribute: str) -> bool:
        return attribute.lower() in self.attributes.get(tag.lower(), frozenset())

    def clean(self, text: str) -> str:
        """Return ``text`` with everything outside the policy neutralized."""
        return self._cleaner.clean(text)

    def __repr__(self) -> str:
        return f"<SanitizePolicy(name={self.name!r}, tags={len(self.tags)}, strip={self.strip})>"


# Names never carry markup: escape every tag, keep the text.
ESCAPE_ALL = SanitizePolicy(name="escape_all")

INLINE_TAGS = (
    "a", "abbr", "b", "br", "code", "del", "em", "i", "img", "ins", "kbd",
    "mark", "q", "s", "small", "span", "strong", "sub", "sup", "u",
)

INLINE_MARKUP = SanitizePolicy(
    name="inline_markup",
    tags=INLINE_TAGS,
    attributes={
        "a": ("href", "title"),
        "abbr": ("title",),
        "img": ("src", "alt", "title", "width", "height"),
    },
    strip=True,
)


def escape_text(value: str) -> str:
    """Sanitize a plain-text field such as ``folder_name`` or ``note_name``."""
    return ESCAPE_ALL.clean(value)


def clean_content(value: str) -> str:
    """Sanitize note content, keeping allowed inline markup."""
    return INLINE_MARKUP.clean(value)

