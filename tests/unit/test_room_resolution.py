"""Unit tests for room label and view resolution."""

import pytest

from dvc_pricing.models import RoomSelection, UnsupportedResortError, UnsupportedRoomError
from dvc_pricing.services.chart_registry import ChartRegistry
from dvc_pricing.services.room_resolution import (
    get_room_candidates,
    normalize_room_type,
    resolve_room_and_view,
)


class TestRoomCandidates:
    """Tests for label normalization and candidate lists."""

    def test_normalize_strips_spaces_and_punctuation(self) -> None:
        assert normalize_room_type(" 2 Bedroom ") == "2BEDROOM"
        assert normalize_room_type("Grand-Villa") == "GRANDVILLA"
        assert normalize_room_type(None) == ""

    def test_studio_candidates_start_with_plain_studio(self) -> None:
        candidates = get_room_candidates("Studio")
        assert candidates[0] == "STUDIO"
        assert "DELUXESTUDIO" in candidates

    def test_one_bedroom_aliases(self) -> None:
        assert get_room_candidates("1 Bedroom") == ["ONEBR"]
        assert get_room_candidates("One Bedroom") == ["ONEBR"]

    def test_unknown_label_is_literal_code(self) -> None:
        assert get_room_candidates("Treehouse") == ["TREEHOUSE"]


class TestResolveRoomAndView:
    """Tests for resolve_room_and_view against the bundled resorts."""

    @pytest.mark.parametrize(
        ("resort_code", "room_type", "expected"),
        [
            ("BLT", "Studio", RoomSelection(room="STUDIO", view="S")),
            ("AKV", "Studio", RoomSelection(room="STUDIO", view="V")),
            ("VGF", "Studio", RoomSelection(room="DELUXESTUDIO", view="S")),
            ("RVA", "studio", RoomSelection(room="DELUXESTUDIO", view="S")),
            ("PVB", "2 Bedroom", RoomSelection(room="TWOBRBUNGALOW", view="L")),
            ("SSR", "2 Bedroom", RoomSelection(room="TWOBR", view="S")),
            ("SSR", "Treehouse", RoomSelection(room="TREEHOUSE", view="S")),
            ("BWV", "Grand Villa", RoomSelection(room="GRANDVILLA", view="S")),
        ],
    )
    def test_resolves_first_offered_candidate(
        self,
        registry: ChartRegistry,
        resort_code: str,
        room_type: str,
        expected: RoomSelection,
    ) -> None:
        assert resolve_room_and_view(resort_code, room_type, registry) == expected

    def test_room_not_offered_raises(self, registry: ChartRegistry) -> None:
        with pytest.raises(UnsupportedRoomError) as exc_info:
            resolve_room_and_view("BLT", "Cabin", registry)
        assert exc_info.value.details == {"resort_code": "BLT", "room_type": "Cabin"}

    def test_unknown_resort_raises(self, registry: ChartRegistry) -> None:
        with pytest.raises(UnsupportedResortError):
            resolve_room_and_view("XYZ", "Studio", registry)

    def test_defaults_to_process_registry(self) -> None:
        assert resolve_room_and_view("blt", "Studio").room == "STUDIO"
