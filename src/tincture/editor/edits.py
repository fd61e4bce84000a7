"""Helpers describing a single contiguous edit of the logical text."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["TextEdit", "compute_text_edit"]


@dataclass(slots=True, frozen=True)
class TextEdit:
    """Replacement of ``deleted_length`` characters at ``start`` by ``inserted_length`` new ones."""

    start: int
    inserted_length: int = 0
    deleted_length: int = 0

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError("TextEdit start must be non-negative")
        if self.inserted_length < 0 or self.deleted_length < 0:
            raise ValueError("TextEdit lengths must be non-negative")

    @property
    def end(self) -> int:
        """End of the deleted span in pre-edit coordinates."""

        return self.start + self.deleted_length

    @property
    def delta(self) -> int:
        return self.inserted_length - self.deleted_length

    @property
    def is_noop(self) -> bool:
        return self.inserted_length == 0 and self.deleted_length == 0

    def apply(self, text: str, inserted: str) -> str:
        """Return ``text`` with the edit applied, inserting ``inserted``."""

        if len(inserted) != self.inserted_length:
            raise ValueError(
                f"Inserted text has {len(inserted)} characters, edit expects {self.inserted_length}"
            )
        return text[: self.start] + inserted + text[self.end :]


def compute_text_edit(before: str, after: str, *, caret: int | None = None) -> TextEdit:
    """Return the single contiguous edit that turns ``before`` into ``after``.

    The edit is found by trimming the longest common prefix and then the
    longest common suffix that does not overlap it. Inside runs of repeated
    characters that split is ambiguous; pass ``caret`` (the caret offset in
    ``after`` once the edit is applied) to pin the inserted text so it ends at
    the caret.
    """

    limit = min(len(before), len(after))
    prefix = 0
    while prefix < limit and before[prefix] == after[prefix]:
        prefix += 1

    if caret is not None:
        inserted_guess = max(0, len(after) - len(before))
        prefix = min(prefix, max(0, caret - inserted_guess))

    suffix = 0
    max_suffix = limit - prefix
    while suffix < max_suffix and before[len(before) - 1 - suffix] == after[len(after) - 1 - suffix]:
        suffix += 1

    return TextEdit(
        start=prefix,
        inserted_length=len(after) - prefix - suffix,
        deleted_length=len(before) - prefix - suffix,
    )
