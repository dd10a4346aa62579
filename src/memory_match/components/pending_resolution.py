from dataclasses import dataclass


@dataclass(slots=True)
class PendingResolution:
    """Deferred evaluation of a full selection.

    ``remaining`` counts down with tick ``dt``; ``generation`` must equal the
    game state's generation when it fires or the resolution is dropped.
    """
    remaining: float
    generation: int
