"""Tests for insectboard.movement — directions, scanning, selection, travel."""

from collections.abc import Callable

import pytest

from insectboard.movement.directions import (
    DIAGONAL,
    GAITS,
    ORTHOGONAL,
    Direction,
    gait_for,
)
from insectboard.movement.engine import (
    best_direction,
    ray,
    take_turn,
    travel,
    visible_value,
)
from insectboard.world.board import Board
from insectboard.world.entities import Color, FoodPoint, Insect, Species
from insectboard.world.position import Position

PutInsect = Callable[..., Insect]
PutFood = Callable[..., FoodPoint]


class TestDirections:
    """Tests for the direction table and species gaits."""

    def test_orthogonal_vectors(self) -> None:
        assert (Direction.N.dx, Direction.N.dy) == (-1, 0)
        assert (Direction.S.dx, Direction.S.dy) == (1, 0)
        assert (Direction.E.dx, Direction.E.dy) == (0, 1)
        assert (Direction.W.dx, Direction.W.dy) == (0, -1)

    def test_diagonal_vectors(self) -> None:
        assert (Direction.NE.dx, Direction.NE.dy) == (-1, 1)
        assert (Direction.SE.dx, Direction.SE.dy) == (1, 1)
        assert (Direction.SW.dx, Direction.SW.dy) == (1, -1)
        assert (Direction.NW.dx, Direction.NW.dy) == (-1, -1)

    def test_labels(self) -> None:
        labels = [d.label for d in Direction]
        assert labels == [
            "North",
            "East",
            "South",
            "West",
            "North-East",
            "South-East",
            "South-West",
            "North-West",
        ]

    def test_every_species_has_a_gait(self) -> None:
        assert set(GAITS) == set(Species)

    def test_gait_orders(self) -> None:
        assert gait_for(Species.BUTTERFLY).directions == ORTHOGONAL
        assert gait_for(Species.SPIDER).directions == DIAGONAL
        assert gait_for(Species.ANT).directions == ORTHOGONAL + DIAGONAL
        assert ORTHOGONAL == (Direction.N, Direction.E, Direction.S, Direction.W)
        assert DIAGONAL == (Direction.NE, Direction.SE, Direction.SW, Direction.NW)

    def test_grasshopper_strides_two(self) -> None:
        gait = gait_for(Species.GRASSHOPPER)
        assert gait.stride == 2
        assert gait.directions == ORTHOGONAL
        assert gait_for(Species.BUTTERFLY).stride == 1


class TestRay:
    """Tests for ray cell enumeration."""

    def test_stops_at_edge(self, small_board: Board) -> None:
        cells = list(ray(small_board, Position(2, 2), Direction.E))
        assert cells == [Position(2, 3), Position(2, 4)]

    def test_leaves_immediately(self, small_board: Board) -> None:
        assert list(ray(small_board, Position(1, 1), Direction.N)) == []
        assert list(ray(small_board, Position(1, 1), Direction.NW)) == []

    def test_stride(self, small_board: Board) -> None:
        cells = list(ray(small_board, Position(1, 1), Direction.S, stride=2))
        assert cells == [Position(3, 1)]


class TestVisibleValue:
    """Tests for the read-only direction scan."""

    def test_sums_whole_ray(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        ant = put_insect(board, 3, 1, Species.ANT)
        put_food(board, 3, 2, 2)
        put_food(board, 3, 4, 5)
        put_food(board, 3, 6, 1)
        assert visible_value(board, ant, Direction.E) == 8

    def test_sees_through_insects(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        butterfly = put_insect(board, 1, 1, Species.BUTTERFLY, Color.RED)
        put_insect(board, 1, 2, Species.ANT, Color.BLUE)
        put_food(board, 1, 3, 3)
        assert visible_value(board, butterfly, Direction.E) == 3

    def test_ignores_cells_off_the_ray(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        ant = put_insect(board, 3, 3)
        put_food(board, 2, 5, 9)
        assert visible_value(board, ant, Direction.E) == 0

    def test_zero_at_edge(self, small_board: Board, put_insect: PutInsect) -> None:
        ant = put_insect(small_board, 1, 1)
        assert visible_value(small_board, ant, Direction.N) == 0

    def test_direction_outside_gait(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        spider = put_insect(board, 4, 4, Species.SPIDER)
        put_food(board, 2, 4, 6)
        assert visible_value(board, spider, Direction.N) == 0

    def test_grasshopper_skips_odd_cells(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        hopper = put_insect(board, 1, 1, Species.GRASSHOPPER)
        put_food(board, 1, 2, 3)
        put_food(board, 1, 3, 7)
        put_food(board, 1, 5, 2)
        assert visible_value(board, hopper, Direction.E) == 9

    def test_does_not_mutate(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        ant = put_insect(board, 1, 1)
        put_food(board, 1, 3, 4)
        for direction in Direction:
            visible_value(board, ant, direction)
        assert len(board) == 2


class TestBestDirection:
    """Tests for direction selection and tie-breaking."""

    def test_picks_maximum(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        butterfly = put_insect(board, 3, 3, Species.BUTTERFLY)
        put_food(board, 1, 3, 2)
        put_food(board, 6, 3, 7)
        assert best_direction(board, butterfly) is Direction.S

    def test_tie_goes_to_earlier_direction(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        butterfly = put_insect(board, 3, 3, Species.BUTTERFLY)
        put_food(board, 1, 3, 4)
        put_food(board, 3, 5, 4)
        assert best_direction(board, butterfly) is Direction.N

    def test_tie_between_later_directions(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        butterfly = put_insect(board, 3, 3, Species.BUTTERFLY)
        put_food(board, 5, 3, 2)
        put_food(board, 3, 1, 2)
        assert best_direction(board, butterfly) is Direction.S

    def test_ant_prefers_orthogonal_on_tie(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        ant = put_insect(board, 3, 3, Species.ANT)
        put_food(board, 1, 1, 5)
        put_food(board, 3, 1, 5)
        assert best_direction(board, ant) is Direction.W

    def test_ant_takes_richer_diagonal(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        ant = put_insect(board, 3, 3, Species.ANT)
        put_food(board, 4, 4, 6)
        put_food(board, 3, 1, 5)
        assert best_direction(board, ant) is Direction.SE

    @pytest.mark.parametrize(
        ("species", "expected"),
        [
            (Species.ANT, Direction.N),
            (Species.BUTTERFLY, Direction.N),
            (Species.GRASSHOPPER, Direction.N),
            (Species.SPIDER, Direction.NE),
        ],
    )
    def test_nothing_visible_returns_first(
        self,
        board: Board,
        put_insect: PutInsect,
        species: Species,
        expected: Direction,
    ) -> None:
        insect = put_insect(board, 3, 3, species)
        assert best_direction(board, insect) is expected

    def test_spider_ignores_orthogonal_food(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        spider = put_insect(board, 3, 3, Species.SPIDER)
        put_food(board, 3, 6, 10)
        put_food(board, 5, 1, 1)
        assert best_direction(board, spider) is Direction.SW


class TestTravel:
    """Tests for the consuming walk."""

    def test_vacates_origin_even_without_steps(
        self,
        small_board: Board,
        put_insect: PutInsect,
    ) -> None:
        ant = put_insect(small_board, 1, 1)
        assert travel(small_board, ant, Direction.N) == 0
        assert small_board.entity_at(Position(1, 1)) is None

    def test_eats_everything_to_the_edge(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        ant = put_insect(board, 1, 1)
        put_food(board, 1, 2, 2)
        put_food(board, 1, 5, 3)
        assert travel(board, ant, Direction.E) == 5
        assert len(board) == 0

    def test_stops_on_other_colour(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        ant = put_insect(board, 1, 1, Species.ANT, Color.RED)
        put_food(board, 1, 2, 2)
        spider = put_insect(board, 1, 3, Species.SPIDER, Color.BLUE)
        beyond = put_food(board, 1, 4, 4)
        assert travel(board, ant, Direction.E) == 2
        assert board.entity_at(Position(1, 2)) is None
        assert board.entity_at(Position(1, 3)) is spider
        assert board.entity_at(Position(1, 4)) is beyond

    def test_steps_over_same_colour(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        ant = put_insect(board, 1, 1, Species.ANT, Color.RED)
        put_food(board, 1, 2, 2)
        spider = put_insect(board, 1, 3, Species.SPIDER, Color.RED)
        put_food(board, 1, 4, 4)
        assert travel(board, ant, Direction.E) == 6
        assert board.entity_at(Position(1, 3)) is spider
        assert board.entity_at(Position(1, 4)) is None

    def test_butterfly_stops_on_other_colour(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        butterfly = put_insect(board, 6, 2, Species.BUTTERFLY, Color.GREEN)
        put_insect(board, 4, 2, Species.ANT, Color.YELLOW)
        put_food(board, 2, 2, 9)
        assert travel(board, butterfly, Direction.N) == 0
        assert board.entity_at(Position(2, 2)) is not None

    def test_grasshopper_jumps_over_blockers(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        hopper = put_insect(board, 1, 1, Species.GRASSHOPPER, Color.GREEN)
        put_insect(board, 2, 1, Species.ANT, Color.RED)
        put_food(board, 3, 1, 4)
        put_food(board, 5, 1, 1)
        assert travel(board, hopper, Direction.S) == 5

    def test_diagonal_travel(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        spider = put_insect(board, 6, 1, Species.SPIDER)
        put_food(board, 5, 2, 1)
        put_food(board, 3, 4, 2)
        put_food(board, 1, 6, 3)
        assert travel(board, spider, Direction.NE) == 6
        assert board.total_food() == 0

    def test_rejects_direction_outside_gait(
        self,
        board: Board,
        put_insect: PutInsect,
    ) -> None:
        butterfly = put_insect(board, 3, 3, Species.BUTTERFLY)
        with pytest.raises(ValueError):
            travel(board, butterfly, Direction.NE)
        assert board.entity_at(Position(3, 3)) is butterfly


class TestTakeTurn:
    """Tests for a full insect turn."""

    def test_butterfly_eats_east(
        self,
        small_board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        butterfly = put_insect(small_board, 2, 2, Species.BUTTERFLY, Color.YELLOW)
        put_food(small_board, 2, 4, 5)
        assert take_turn(small_board, butterfly) == (Direction.E, 5)
        assert len(small_board) == 0

    def test_grasshopper_leaves_skipped_food(
        self,
        small_board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        hopper = put_insect(small_board, 1, 1, Species.GRASSHOPPER)
        skipped = put_food(small_board, 1, 2, 3)
        put_food(small_board, 1, 3, 7)
        assert take_turn(small_board, hopper) == (Direction.E, 7)
        assert small_board.entity_at(Position(1, 2)) is skipped
        assert small_board.entity_at(Position(1, 1)) is None

    def test_travel_may_eat_less_than_seen(
        self,
        board: Board,
        put_insect: PutInsect,
        put_food: PutFood,
    ) -> None:
        ant = put_insect(board, 1, 1, Species.ANT, Color.RED)
        put_food(board, 1, 2, 1)
        put_insect(board, 1, 3, Species.SPIDER, Color.BLUE)
        put_food(board, 1, 5, 20)
        direction, eaten = take_turn(board, ant)
        assert direction is Direction.E
        assert eaten == 1
