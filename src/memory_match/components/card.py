from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class Card:
    index: int
    # Dot entity ids in display order; order carries no matching meaning.
    dot_entities: List[int] = field(default_factory=list)
