# SlidePrompter Slide Store

"""
In-memory script storage keyed by slide number.

A slide number is present only while its record carries a non-empty script
or title; clearing both removes the slide. The serialized form maps string
slide numbers to {"script", "title"} records.

Two raw layouts are accepted on load:
- Record layout: {"3": {"script": "...", "title": "..."}}
- Legacy layout: {"3": "..."} (script text only, migrated with an empty title)
"""

from typing import Any, Dict, Iterator, List, Mapping, Optional

from slide_prompter.core.models import SlideRecord
from slide_prompter.utils.logging import get_logger

logger = get_logger(__name__)


class SlideDataError(ValueError):
    """Raised when raw slide data cannot be interpreted."""


def _parse_slide_number(key: Any) -> int:
    if isinstance(key, bool):
        raise SlideDataError(f"Invalid slide number: {key!r}")
    if isinstance(key, int):
        number = key
    elif isinstance(key, str) and key.strip().isdecimal():
        number = int(key.strip())
    else:
        raise SlideDataError(f"Invalid slide number: {key!r}")
    if number < 1:
        raise SlideDataError(f"Slide numbers start at 1, got {number}")
    return number


def _parse_record(number: int, value: Any) -> SlideRecord:
    if isinstance(value, str):
        # Legacy layout: the value is the script itself
        return SlideRecord(script=value, title="")
    if isinstance(value, Mapping):
        if "script" not in value and "title" not in value:
            raise SlideDataError(f"Slide {number} has neither script nor title")
        for field in ("script", "title"):
            if value.get(field) is not None and not isinstance(value[field], str):
                raise SlideDataError(f"Slide {number} {field} must be text")
        return SlideRecord.from_dict(value)
    raise SlideDataError(
        f"Slide {number} must be a string or a record, got {type(value).__name__}"
    )


class SlideStore:
    """
    Mapping of slide number to SlideRecord.

    Only records with content are kept, so serialize() never writes empty
    slides back to disk.
    """

    def __init__(self, slides: Optional[Mapping[int, SlideRecord]] = None):
        self._slides: Dict[int, SlideRecord] = {}
        for number, record in (slides or {}).items():
            self._put(_parse_slide_number(number), record)

    # =========================================================================
    # Loading / Saving
    # =========================================================================

    @classmethod
    def load(cls, raw: Optional[Mapping[str, Any]]) -> "SlideStore":
        """
        Build a store from persisted data, migrating the legacy layout.

        Args:
            raw: Mapping read from the persistence gateway (None means empty).

        Returns:
            A populated SlideStore.

        Raises:
            SlideDataError: If raw is not a mapping or holds unusable entries.
        """
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise SlideDataError(f"Slide data must be a mapping, got {type(raw).__name__}")

        store = cls()
        migrated = 0
        for key, value in raw.items():
            number = _parse_slide_number(key)
            if isinstance(value, str):
                migrated += 1
            store._put(number, _parse_record(number, value))

        if migrated:
            logger.info("Converted %d slide(s) from the legacy script layout", migrated)
        logger.debug("Loaded %d slide(s)", len(store))
        return store

    def serialize(self) -> Dict[str, Dict[str, str]]:
        """Return the persisted layout: {"<n>": {"script", "title"}}."""
        return {str(n): self._slides[n].to_dict() for n in sorted(self._slides)}

    # =========================================================================
    # Access
    # =========================================================================

    def get(self, slide_number: int) -> SlideRecord:
        """Record for a slide, or an empty record if nothing is stored."""
        return self._slides.get(_parse_slide_number(slide_number), SlideRecord())

    def set_script(self, slide_number: int, text: str) -> SlideRecord:
        """Trim and store script text, removing the slide if it ends up empty."""
        number = _parse_slide_number(slide_number)
        return self._put(number, self.get(number).with_script(text.strip()))

    def set_title(self, slide_number: int, text: str) -> SlideRecord:
        """Trim and store a title, removing the slide if it ends up empty."""
        number = _parse_slide_number(slide_number)
        return self._put(number, self.get(number).with_title(text.strip()))

    def _put(self, number: int, record: SlideRecord) -> SlideRecord:
        if record.is_empty:
            self._slides.pop(number, None)
            return SlideRecord()
        self._slides[number] = record
        return record

    @property
    def slide_numbers(self) -> List[int]:
        """Slide numbers that carry content, ascending."""
        return sorted(self._slides)

    @property
    def highest_slide(self) -> int:
        """Largest slide number with content (0 when empty)."""
        return max(self._slides, default=0)

    def __len__(self) -> int:
        return len(self._slides)

    def __contains__(self, slide_number: object) -> bool:
        return slide_number in self._slides

    def __iter__(self) -> Iterator[int]:
        return iter(self.slide_numbers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlideStore):
            return NotImplemented
        return self._slides == other._slides

    def __repr__(self) -> str:
        return f"SlideStore({len(self)} slides)"
