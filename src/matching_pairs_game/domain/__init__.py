"""ドメイン層（純粋ロジック/データモデル）。

提供物:
"""

from src.matching_pairs_game.domain.constants import (
    DEFAULT_PAIRS,
    EXPORT_VERSION,
    STORAGE_KEY,
)
from src.matching_pairs_game.domain.data import (
    Pair,
    pairs_from_records,
    pairs_to_records,
    validate_pair,
)
from src.matching_pairs_game.domain.drag import Box, DragController, find_insert_before, row_boxes
from src.matching_pairs_game.domain.errors import (
    ImportFormatError,
    PairValidationError,
    StorageError,
)
from src.matching_pairs_game.domain.game import (
    CheckResult,
    GameItem,
    Phase,
    Round,
    Side,
    build_items,
    build_round,
    check_arrangement,
    shuffle_in_place,
)
from src.matching_pairs_game.domain.timers import Scheduler, TimerHandle

__all__ = [
    # data
    "Pair",
    "validate_pair",
    "pairs_to_records",
    "pairs_from_records",
    # game
    "Side",
    "Phase",
    "GameItem",
    "Round",
    "CheckResult",
    "shuffle_in_place",
    "build_items",
    "build_round",
    "check_arrangement",
    # drag
    "Box",
    "DragController",
    "find_insert_before",
    "row_boxes",
    # timers
    "Scheduler",
    "TimerHandle",
    # errors
    "PairValidationError",
    "ImportFormatError",
    "StorageError",
    # constants
    "STORAGE_KEY",
    "EXPORT_VERSION",
    "DEFAULT_PAIRS",
]
