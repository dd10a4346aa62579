from dataclasses import dataclass
from typing import Tuple

from memory_match.constants import DEFAULT_SYMBOLS


@dataclass(slots=True)
class SymbolPool:
    """Ordered, opaque symbol identifiers supplied by the presentation layer."""
    symbols: Tuple[str, ...] = DEFAULT_SYMBOLS

    def symbol_for_set(self, set_index: int) -> str:
        # Sets past the end of the pool reuse earlier symbols.
        if not self.symbols:
            raise ValueError("Symbol pool is empty")
        return self.symbols[set_index % len(self.symbols)]
