"""
Moon phase catalog.

The eight named phases in waxing-to-waning order starting at New Moon.
Order is significant: a phase's position in MOON_PHASES is its index in the
synodic cycle and its angle is index * 45 degrees.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MoonPhase:
    """Static description of one named lunar phase."""
    name: str
    illumination: int     # Nominal illumination percent
    emoji: str
    angle: int            # Degrees along the synodic cycle (0-315)
    description: str
    photography: str      # Photography tip for this phase

    @property
    def index(self) -> int:
        return self.angle // 45


MOON_PHASES: tuple[MoonPhase, ...] = (
    MoonPhase(
        name="New Moon",
        illumination=0,
        emoji="🌑",
        angle=0,
        description="Moon is between Earth and Sun, invisible to the naked eye",
        photography="Perfect for stargazing and astrophotography of deep space objects",
    ),
    MoonPhase(
        name="Waxing Crescent",
        illumination=25,
        emoji="🌒",
        angle=45,
        description="Thin crescent visible in western sky after sunset",
        photography="Capture earthshine - the faint glow on the dark portion of the moon",
    ),
    MoonPhase(
        name="First Quarter",
        illumination=50,
        emoji="🌓",
        angle=90,
        description="Half moon visible, rises at noon and sets at midnight",
        photography="Best time to photograph lunar craters along the terminator line",
    ),
    MoonPhase(
        name="Waxing Gibbous",
        illumination=75,
        emoji="🌔",
        angle=135,
        description="More than half illuminated, visible most of the night",
        photography="Great for wide-angle shots with landscape foregrounds",
    ),
    MoonPhase(
        name="Full Moon",
        illumination=100,
        emoji="🌕",
        angle=180,
        description="Fully illuminated, rises at sunset and sets at sunrise",
        photography="Use fast shutter speeds, low ISO, and small apertures for sharp details",
    ),
    MoonPhase(
        name="Waning Gibbous",
        illumination=75,
        emoji="🌖",
        angle=225,
        description="Decreasing illumination, visible after midnight",
        photography="Excellent for morning landscape photography with moon in frame",
    ),
    MoonPhase(
        name="Last Quarter",
        illumination=50,
        emoji="🌗",
        angle=270,
        description="Half moon visible in morning sky, rises at midnight",
        photography="Perfect for dawn photography with moon and sunrise colors",
    ),
    MoonPhase(
        name="Waning Crescent",
        illumination=25,
        emoji="🌘",
        angle=315,
        description="Thin crescent visible before sunrise in eastern sky",
        photography="Challenge shot - try capturing Venus near the crescent moon",
    ),
)

PHASE_COUNT = len(MOON_PHASES)


def get_phase(index: int) -> MoonPhase:
    """Catalog entry for a phase index; wraps around past Waning Crescent."""
    return MOON_PHASES[index % PHASE_COUNT]


def find_phase(name: str) -> MoonPhase:
    """Look up a phase by name, case-insensitively.

    Raises:
        KeyError: If no phase has that name.
    """
    wanted = name.strip().lower()
    for phase in MOON_PHASES:
        if phase.name.lower() == wanted:
            return phase
    raise KeyError(name)
