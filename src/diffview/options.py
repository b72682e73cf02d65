#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for comparison and viewport configuration.

Options are immutable. Toggling a setting produces a new options object via
``create_updated`` and, for comparison options, a fresh ``DiffResult``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from diffview.constants import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_CASE_SENSITIVE,
    DEFAULT_CONTAINER_HEIGHT,
    DEFAULT_IGNORE_KEY_ORDER,
    DEFAULT_IGNORE_WHITESPACE,
    DEFAULT_LOOKAHEAD_LIMIT,
    DEFAULT_ROW_HEIGHT,
)
from diffview.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Normalization and matching options for a comparison.

    Parameters
    ----------
    ignore_whitespace : bool, default False
        Collapse whitespace runs to a single space and trim each line before
        comparing.
    case_sensitive : bool, default True
        When False, lines are compared case-insensitively.
    ignore_key_order : bool, default False
        Sort JSON object keys / XML attributes before comparing. Only applied
        when both sides are declared as the same structured format.
    lookahead_limit : int or None, default None
        Maximum number of lines past the cursor searched for a reappearing
        line. None searches the remainder of the other side.

    """

    ignore_whitespace: bool = field(
        default=DEFAULT_IGNORE_WHITESPACE,
        metadata={"help": "Collapse whitespace runs and trim lines before comparing", "importance": "core"},
    )
    case_sensitive: bool = field(
        default=DEFAULT_CASE_SENSITIVE,
        metadata={"help": "Compare lines case-sensitively", "importance": "core"},
    )
    ignore_key_order: bool = field(
        default=DEFAULT_IGNORE_KEY_ORDER,
        metadata={"help": "Sort JSON keys / XML attributes before comparing", "importance": "core"},
    )
    lookahead_limit: int | None = field(
        default=DEFAULT_LOOKAHEAD_LIMIT,
        metadata={
            "help": "Lines past the cursor searched for a reappearing line (None for unbounded)",
            "type": int,
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate the lookahead bound.

        Raises
        ------
        ValidationError
            If ``lookahead_limit`` is not a positive integer.

        """
        if self.lookahead_limit is not None and self.lookahead_limit < 1:
            raise ValidationError(
                f"lookahead_limit must be positive, got {self.lookahead_limit}",
                parameter_name="lookahead_limit",
                parameter_value=self.lookahead_limit,
            )


@dataclass(frozen=True)
class ViewportOptions(CloneFrozenMixin):
    """Geometry of one virtualized diff panel.

    Parameters
    ----------
    row_height : int, default 24
        Fixed pixel height of every row.
    buffer_size : int, default 20
        Extra rows materialized above and below the visible range.
    container_height : int, default 600
        Pixel height of the scroll container.

    """

    row_height: int = field(
        default=DEFAULT_ROW_HEIGHT,
        metadata={"help": "Fixed pixel height of every row", "type": int, "importance": "core"},
    )
    buffer_size: int = field(
        default=DEFAULT_BUFFER_SIZE,
        metadata={"help": "Extra rows rendered above/below the visible range", "type": int, "importance": "advanced"},
    )
    container_height: int = field(
        default=DEFAULT_CONTAINER_HEIGHT,
        metadata={"help": "Pixel height of the scroll container", "type": int, "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate geometry.

        Raises
        ------
        ValidationError
            If ``row_height`` is not positive or ``buffer_size`` is negative.

        """
        if self.row_height <= 0:
            raise ValidationError(
                f"row_height must be positive, got {self.row_height}",
                parameter_name="row_height",
                parameter_value=self.row_height,
            )
        if self.buffer_size < 0:
            raise ValidationError(
                f"buffer_size must be non-negative, got {self.buffer_size}",
                parameter_name="buffer_size",
                parameter_value=self.buffer_size,
            )
