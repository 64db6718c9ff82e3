#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""LDtk accessor configuration.

Rule: constants only in this file. (no logic)
"""

# --- Layers ---
DEFAULT_ENTITY_LAYER = "Entities"
DEFAULT_INT_GRID_LAYER = "IntGrid"

# --- Int grid ---
EMPTY_CELL_VALUE = 0         # LDtk writes 0 for cells without a value
