"""Identifiers for the bodies ephemjax can model."""

from __future__ import annotations

import enum


class Body(enum.Enum):
    """The major planets, in order of distance from the Sun.

    Values are the lower-case names used in VSOP87 file headers and
    log messages.

    Attributes:
        MERCURY: Mercury.
        VENUS: Venus.
        EARTH: Earth (the Earth-Moon barycenter for element-based models).
        MARS: Mars.
        JUPITER: Jupiter.
        SATURN: Saturn.
        URANUS: Uranus.
        NEPTUNE: Neptune.
    """

    MERCURY = "mercury"
    VENUS = "venus"
    EARTH = "earth"
    MARS = "mars"
    JUPITER = "jupiter"
    SATURN = "saturn"
    URANUS = "uranus"
    NEPTUNE = "neptune"

    @classmethod
    def from_name(cls, name: str) -> Body:
        """Look up a body by case-insensitive name.

        Args:
            name: Body name, e.g. ``"Venus"`` or ``"VENUS"``.

        Returns:
            The matching :class:`Body`.

        Raises:
            ValueError: If *name* is not a known body.
        """
        key = name.strip().lower()
        for body in cls:
            if body.value == key:
                return body
        raise ValueError(
            f"Unknown body '{name}'. Must be one of: "
            f"{', '.join(b.value for b in cls)}"
        )
