#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Engine-facing shapes built from LDtk layers."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from ldtk_config import EMPTY_CELL_VALUE


class Vector2(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float
    y: float


class Entity(BaseModel):
    """An entity placed relative to the level centre, y pointing up."""

    model_config = ConfigDict(extra="forbid")

    identifier: str
    type: str
    position: Vector2


class Grid(BaseModel):
    """A decoded int grid layer.

    ``data`` is flat and row-major, ``width * height`` long. ``position`` is the
    level centre in pixel space (top-left origin), unlike ``Entity.position``.
    """

    model_config = ConfigDict(extra="forbid")

    cell_size: Vector2
    data: List[int]
    definitions: Dict[int, Optional[str]]
    width: int
    height: int
    position: Vector2

    def value_at(self, column: int, row: int) -> Optional[int]:
        if not (0 <= column < self.width and 0 <= row < self.height):
            return None
        index = row * self.width + column
        if index >= len(self.data):
            return None
        return self.data[index]

    def identifier_at(self, column: int, row: int) -> Optional[str]:
        value = self.value_at(column, row)
        if value is None or value == EMPTY_CELL_VALUE:
            return None
        return self.definitions.get(value)
