"""Scale tiers applied to indicator dots."""

from enum import Enum

from ..config.constants import (
    SCALE_GONE,
    SCALE_NORMAL,
    SCALE_SELECTED,
    SCALE_SMALL,
    SCALE_SMALLEST,
)


class ScaleTier(Enum):
    """Discrete visual scale level of a dot.

    The value is the scale factor handed to the animation; ``GONE`` means the
    dot is hidden rather than scaled to nothing.
    """

    GONE = SCALE_GONE
    SMALLEST = SCALE_SMALLEST
    SMALL = SCALE_SMALL
    NORMAL = SCALE_NORMAL
    SELECTED = SCALE_SELECTED

    @property
    def scale(self) -> float:
        return float(self.value)

    @property
    def visible(self) -> bool:
        return self is not ScaleTier.GONE

    @classmethod
    def from_scale(cls, scale: float) -> "ScaleTier":
        """Return the tier whose factor is nearest to ``scale``.

        Used while an animation is between two tiers.
        """
        return min(cls, key=lambda tier: abs(tier.scale - scale))
