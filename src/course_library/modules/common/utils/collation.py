"""Locale-aware ordering of file and directory names.

Names are compared with the Unicode Collation Algorithm, tailored the way the
Arabic locale orders scripts: spaces, punctuation, symbols and digits first,
then Arabic letters, then Latin and every other script in their default
order. Accented Latin names sort next to their base letters.
"""

import unicodedata
from functools import lru_cache
from typing import Callable, Iterable, List, Sequence, TypeVar

from pyuca import Collator

T = TypeVar("T")

# Blocks holding the base Arabic letters and their extensions.
ARABIC_LETTER_RANGES = ((0x0600, 0x06FF), (0x0750, 0x077F), (0x08A0, 0x08FF))
# First primary weight of the implicit (unlisted code point) ranges.
IMPLICIT_WEIGHT_BASE = 0xFB40


class ArabicCollator(Collator):
    """DUCET collator with the Arabic script group moved ahead of Latin.

    Primary weights of Arabic letters are shifted down to where Latin starts,
    and the scripts from Latin up to Arabic are shifted up by the width of the
    Arabic block, so relative order inside each script is unchanged.
    """

    def __init__(self):
        super().__init__()
        self.latin_start = self._primary("a")
        arabic = [
            self._primary(chr(code_point))
            for start, end in ARABIC_LETTER_RANGES
            for code_point in range(start, end + 1)
            if unicodedata.category(chr(code_point)).startswith("L")
        ]
        # Letters newer than the collation table only carry implicit weights.
        arabic = [weight for weight in arabic if 0 < weight < IMPLICIT_WEIGHT_BASE]
        self.arabic_start = min(arabic)
        self.arabic_end = max(arabic)

    def _primary(self, char: str) -> int:
        for element in self.collation_elements(unicodedata.normalize("NFD", char)):
            if element[0]:
                return int(element[0])
        return 0

    def _reorder(self, element: Sequence[int]) -> tuple:
        primary = int(element[0])
        if self.arabic_start <= primary <= self.arabic_end:
            primary = primary - self.arabic_start + self.latin_start
        elif self.latin_start <= primary < self.arabic_start:
            primary += self.arabic_end - self.arabic_start + 1
        return (primary, *element[1:])

    def sort_key(self, string: str) -> tuple:
        elements = self.collation_elements(unicodedata.normalize("NFD", string))
        return self.sort_key_from_collation_elements([self._reorder(element) for element in elements])


@lru_cache(maxsize=1)
def get_collator() -> ArabicCollator:
    """Get the shared collator; building it parses the collation table once."""
    return ArabicCollator()


def collation_key(name: str) -> tuple:
    """Sort key for ``name``, with the raw string as the final tie-break."""
    return (get_collator().sort_key(name), name)


def collate(items: Iterable[T], key: Callable[[T], str]) -> List[T]:
    """Return ``items`` sorted by the collation order of ``key(item)``."""
    return sorted(items, key=lambda item: collation_key(key(item)))
