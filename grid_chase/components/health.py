from dataclasses import dataclass


@dataclass(frozen=True)
class Health:
    """Tracks current and maximum hit points of the player.

    Attributes:
        health:
            Current hit points. Collision logic that lowers this lives outside
            the movement core.
        max_health:
            Upper bound for ``health``; used to normalize UI read-outs.
    """

    health: int
    max_health: int
