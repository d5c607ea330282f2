from stylepatch.patch.engine import (
    PatchEngine,
    PatchResult,
    TextPatch,
    UndoResult,
    apply_patches,
    splice,
)
from stylepatch.patch.errors import PatchConflictError, PatchError, StaleModelError

__all__ = [
    "PatchConflictError",
    "PatchEngine",
    "PatchError",
    "PatchResult",
    "StaleModelError",
    "TextPatch",
    "UndoResult",
    "apply_patches",
    "splice",
]
