"""Tests for Position coordinates."""

import dataclasses

import pytest

from pawnwise.core.types import Position, is_valid_coordinate


class TestPosition:
    def test_value_equality(self) -> None:
        assert Position(3, 4) == Position(3, 4)
        assert Position(3, 4) != Position(4, 3)

    def test_hashable(self) -> None:
        assert len({Position(0, 0), Position(0, 0), Position(7, 7)}) == 2

    def test_immutable(self) -> None:
        pos = Position(1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            pos.file = 2  # type: ignore[misc]

    @pytest.mark.parametrize("file, rank", [(-1, 0), (0, 8), (8, 3), (2, -4)])
    def test_out_of_board_raises(self, file: int, rank: int) -> None:
        with pytest.raises(ValueError, match="out of board"):
            Position(file, rank)

    def test_name(self) -> None:
        assert Position(0, 0).name == "a1"
        assert Position(4, 3).name == "e4"
        assert str(Position(7, 7)) == "h8"

    def test_parse(self) -> None:
        assert Position.parse("e4") == Position(4, 3)
        assert Position.parse("a8") == Position(0, 7)

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            Position.parse(name)

    def test_offset(self) -> None:
        assert Position(4, 3).offset(1, -2) == Position(5, 1)
        assert Position(0, 0).offset(-1, 0) is None
        assert Position(7, 7).offset(0, 1) is None


def test_is_valid_coordinate() -> None:
    assert is_valid_coordinate(0, 7)
    assert not is_valid_coordinate(8, 0)
