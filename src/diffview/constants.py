#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the diffview library.

Constants are organized by category:
1. Type Definitions - Literal types shared across modules
2. Comparison Defaults - Normalization and diff settings
3. Viewport Defaults - Virtualized rendering geometry and frame timing
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

DiffFormat = Literal["text", "json", "xml"]

# Formats whose key/attribute order can be normalized structurally
STRUCTURED_FORMATS: frozenset[str] = frozenset({"json", "xml"})

# =============================================================================
# Comparison Defaults
# =============================================================================

DEFAULT_IGNORE_WHITESPACE = False
DEFAULT_CASE_SENSITIVE = True
DEFAULT_IGNORE_KEY_ORDER = False

# None means the reappearance search covers the rest of the other side
DEFAULT_LOOKAHEAD_LIMIT: int | None = None

# Indentation used when re-serializing normalized JSON/XML trees
DEFAULT_STRUCTURE_INDENT = 2

# Nesting depth beyond which structural normalization gives up
MAX_TREE_DEPTH = 256

# =============================================================================
# Viewport Defaults
# =============================================================================

DEFAULT_ROW_HEIGHT = 24
DEFAULT_BUFFER_SIZE = 20
DEFAULT_CONTAINER_HEIGHT = 600

# One animation frame at 60 Hz
FRAME_INTERVAL_SECONDS = 1 / 60
