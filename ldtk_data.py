#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Read-only access to LDtk project data.

``LdtkData`` keeps a private copy of an already-decoded LDtk document and
answers per-level, per-layer queries:

- entities re-centred on the level centre with y pointing up
- int grid layers decoded through the project layer definitions
- raw copies of the same records, untouched

Lookups that find nothing return ``[]`` (entities) or ``None`` (grids). The
document is not validated; a record missing a field it needs fails with the
plain ``KeyError``/``TypeError`` at query time.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import orjson

from ldtk_config import DEFAULT_ENTITY_LAYER, DEFAULT_INT_GRID_LAYER
from ldtk_types import Entity, Grid, Vector2

logger = logging.getLogger(__name__)


def _clone(value: Any) -> Any:
    return orjson.loads(orjson.dumps(value))


def load_ldtk_document(path: str | Path) -> Dict[str, Any]:
    payload = orjson.loads(Path(path).read_bytes())
    if not isinstance(payload, dict):
        raise ValueError("LDtk payload must be a JSON object")
    logger.info("Loaded LDtk document %s (%d levels)", path, len(payload.get("levels") or []))
    return payload


class LdtkData:
    def __init__(self, document: Dict[str, Any]):
        self._document: Dict[str, Any] = _clone(document)

    @classmethod
    def from_file(cls, path: str | Path) -> "LdtkData":
        return cls(load_ldtk_document(path))

    @property
    def document(self) -> Dict[str, Any]:
        return _clone(self._document)

    def _find_level(self, level: str) -> Optional[Dict[str, Any]]:
        row = next((lv for lv in self._document["levels"] if lv["identifier"] == level), None)
        if row is None:
            logger.debug("Level not found: %s", level)
        return row

    def _find_layer(self, level_row: Dict[str, Any], layer: str) -> Optional[Dict[str, Any]]:
        row = next((ly for ly in level_row.get("layerInstances") or [] if ly["__identifier"] == layer), None)
        if row is None:
            logger.debug("Layer not found: %s/%s", level_row["identifier"], layer)
        return row

    def _locate(self, level: str, layer: str) -> Optional[Tuple[Dict[str, Any], Dict[str, Any]]]:
        level_row = self._find_level(level)
        if level_row is None:
            return None
        layer_row = self._find_layer(level_row, layer)
        if layer_row is None:
            return None
        return level_row, layer_row

    def _find_layer_definition(self, layer: str) -> Optional[Dict[str, Any]]:
        row = next((d for d in self._document["defs"]["layers"] if d["identifier"] == layer), None)
        if row is None:
            logger.debug("Layer definition not found: %s", layer)
        return row

    def get_entities(self, level: str, layer: str = DEFAULT_ENTITY_LAYER) -> List[Entity]:
        """Entities of a layer, positioned relative to the level centre (y up)."""
        found = self._locate(level, layer)
        if found is None:
            return []
        level_row, layer_row = found

        half_w = level_row["pxWid"] / 2
        half_h = level_row["pxHei"] / 2
        return [
            Entity(
                identifier=row["iid"],
                type=row["__identifier"],
                position=Vector2(x=row["px"][0] - half_w, y=-(row["px"][1] - half_h)),
            )
            for row in layer_row["entityInstances"]
        ]

    def get_entities_raw(self, level: str, layer: str = DEFAULT_ENTITY_LAYER) -> List[Dict[str, Any]]:
        found = self._locate(level, layer)
        if found is None:
            return []
        return [_clone(row) for row in found[1]["entityInstances"]]

    def get_grid(self, level: str, layer: str = DEFAULT_INT_GRID_LAYER) -> Optional[Grid]:
        """Decoded int grid of a layer, or ``None`` when the level, the layer or
        its project definition is missing.

        ``position`` is the level centre in pixel coordinates, not relative to it.
        """
        found = self._locate(level, layer)
        if found is None:
            return None
        level_row, layer_row = found
        definition = self._find_layer_definition(layer)
        if definition is None:
            return None

        # duplicate values: last one wins
        definitions = {row["value"]: row["identifier"] for row in definition["intGridValues"]}
        grid_size = layer_row["__gridSize"]
        return Grid(
            cell_size=Vector2(x=grid_size, y=grid_size),
            data=list(layer_row["intGridCsv"]),
            definitions=definitions,
            width=layer_row["__cWid"],
            height=layer_row["__cHei"],
            position=Vector2(x=level_row["pxWid"] / 2, y=level_row["pxHei"] / 2),
        )

    def get_grid_raw(self, level: str, layer: str = DEFAULT_INT_GRID_LAYER) -> Optional[Dict[str, Any]]:
        found = self._locate(level, layer)
        if found is None:
            return None
        return _clone(found[1])
