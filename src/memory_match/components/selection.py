from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class Selection:
    """Revealed-but-unresolved dots, in the order they were tapped."""

    capacity: int = 2
    dot_entities: List[int] = field(default_factory=list)
