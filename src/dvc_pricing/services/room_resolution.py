"""Room label and view resolution.

Booking forms send loose labels ("Studio", "2 Bedroom", "Grand Villa");
charts are keyed by canonical room codes that differ between resorts. A label
expands to an ordered list of candidate codes and the first one the resort
offers wins.
"""

import re

from dvc_pricing.models import RoomSelection, UnsupportedRoomError
from dvc_pricing.services.chart_registry import ChartRegistry, get_chart_registry

_NON_ALPHANUMERIC = re.compile(r"[^A-Z0-9]")

STUDIO_CANDIDATES = [
    "STUDIO",
    "DELUXESTUDIO",
    "DUOSTUDIO",
    "TOWERSTUDIO",
    "RESORTSTUDIO",
    "GARDENDELUXESTUDIO",
    "GARDENDUOSTUDIO",
    "INNROOM",
]
ONE_BEDROOM_CANDIDATES = ["ONEBR"]
TWO_BEDROOM_CANDIDATES = ["TWOBR", "TWOBRBUNGALOW", "TREEHOUSE"]
THREE_BEDROOM_CANDIDATES = ["GRANDVILLA", "COTTAGE", "PENTHOUSE"]

ROOM_ALIASES: dict[str, list[str]] = {
    "STUDIO": STUDIO_CANDIDATES,
    "1BEDROOM": ONE_BEDROOM_CANDIDATES,
    "ONEBEDROOM": ONE_BEDROOM_CANDIDATES,
    "2BEDROOM": TWO_BEDROOM_CANDIDATES,
    "TWOBEDROOM": TWO_BEDROOM_CANDIDATES,
    "3BEDROOM": THREE_BEDROOM_CANDIDATES,
    "THREEBEDROOM": THREE_BEDROOM_CANDIDATES,
    "GRANDVILLA": THREE_BEDROOM_CANDIDATES,
    "CABIN": ["CABIN"],
}


def normalize_room_type(value: str | None) -> str:
    """Uppercase and strip everything but letters and digits."""
    return _NON_ALPHANUMERIC.sub("", (value or "").strip().upper())


def get_room_candidates(room_type: str | None) -> list[str]:
    """Candidate room codes for a label, most specific first.

    Unknown labels are treated as a canonical code.
    """
    normalized = normalize_room_type(room_type)
    if normalized in ROOM_ALIASES:
        return list(ROOM_ALIASES[normalized])
    return [normalized]


def resolve_room_and_view(
    resort_code: str | None,
    room_type: str | None,
    registry: ChartRegistry | None = None,
) -> RoomSelection:
    """Map a room label to the resort's room code and default view.

    Args:
        resort_code: Resort calculator code
        room_type: Free-text room label or canonical code
        registry: Chart registry; defaults to the process-wide one

    Returns:
        RoomSelection with the first matching room and its first view

    Raises:
        UnsupportedResortError: If the resort has no chart entry.
        UnsupportedRoomError: If no candidate room exists at the resort.
    """
    registry = registry or get_chart_registry()
    resort = registry.get_resort(resort_code)

    candidates = get_room_candidates(room_type)
    room = next((code for code in candidates if resort.supports_room(code)), None)
    if room is None:
        raise UnsupportedRoomError(
            details={"resort_code": resort.code, "room_type": str(room_type)}
        )

    return RoomSelection(room=room, view=resort.default_view(room))
