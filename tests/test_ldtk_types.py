from __future__ import annotations

import importlib.util

import pytest

HAS_DEPS = importlib.util.find_spec("pydantic") is not None and importlib.util.find_spec("orjson") is not None

if HAS_DEPS:
    from pydantic import ValidationError

    from ldtk_types import Entity, Grid, Vector2


def _grid() -> "Grid":
    return Grid(
        cell_size=Vector2(x=16, y=16),
        data=[1, 0, 2, 3, 1, 1],
        definitions={1: "Wall", 2: "Floor"},
        width=3,
        height=2,
        position=Vector2(x=24, y=16),
    )


@pytest.mark.skipif(not HAS_DEPS, reason="requires pydantic and orjson")
def test_value_at_reads_row_major():
    grid = _grid()

    assert grid.value_at(0, 0) == 1
    assert grid.value_at(2, 0) == 2
    assert grid.value_at(0, 1) == 3
    assert grid.value_at(2, 1) == 1


@pytest.mark.skipif(not HAS_DEPS, reason="requires pydantic and orjson")
@pytest.mark.parametrize("column, row", [(-1, 0), (3, 0), (0, 2), (0, -1)])
def test_value_at_out_of_bounds_is_none(column, row):
    assert _grid().value_at(column, row) is None


@pytest.mark.skipif(not HAS_DEPS, reason="requires pydantic and orjson")
def test_value_at_short_data_is_none():
    grid = _grid().model_copy(update={"data": [1, 0]})

    assert grid.value_at(2, 1) is None


@pytest.mark.skipif(not HAS_DEPS, reason="requires pydantic and orjson")
def test_identifier_at_decodes_through_definitions():
    grid = _grid()

    assert grid.identifier_at(0, 0) == "Wall"
    assert grid.identifier_at(2, 0) == "Floor"
    assert grid.identifier_at(1, 0) is None
    assert grid.identifier_at(0, 1) is None
    assert grid.identifier_at(9, 9) is None


@pytest.mark.skipif(not HAS_DEPS, reason="requires pydantic and orjson")
def test_vector2_is_frozen():
    v = Vector2(x=1, y=2)

    with pytest.raises(ValidationError):
        v.x = 5


@pytest.mark.skipif(not HAS_DEPS, reason="requires pydantic and orjson")
def test_entity_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        Entity(identifier="a", type="Coin", position=Vector2(x=0, y=0), extra=1)


@pytest.mark.skipif(not HAS_DEPS, reason="requires pydantic and orjson")
def test_identifier_at_unnamed_definition_is_none():
    grid = _grid().model_copy(update={"definitions": {1: None, 2: "Floor"}})

    assert grid.identifier_at(0, 0) is None
    assert grid.identifier_at(2, 0) == "Floor"
