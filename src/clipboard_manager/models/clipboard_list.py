# region Docstring
"""
clipboard_manager.models.clipboard_list
Domain models for the bounded, deduplicated, most-recently-used clipboard list.
Overview:
- Provides the in-memory list of saved clipboard snapshots along with the Pydantic
    models used to describe a single entry and the persisted state of the list.
Contents:
- Pydantic models:
    - ClipboardEntry:
        A single saved clipboard snapshot. Immutable; the text is stored exactly as it
        was read, truncation is only ever applied when rendering.
    - ClipboardListState:
        The persisted shape of the list, `{"entries": [...], "capacity": int}`.
        Validation repairs whatever was stored so a hydrated list always satisfies the
        list invariants (unique texts, length within capacity, capacity >= 1).
- Classes:
    - ClipboardList:
        Ordered collection of ClipboardEntry, most recent first. Mutated only through
        insert, remove_at, set_capacity and clear.
Design notes:
- insert removes an existing equal text first, then inserts at index 0, then trims
    the tail. An existing entry is therefore promoted, never evicted in favour of
    its own duplicate.
- Every mutation builds the new entry list before swapping it in, so a reader never
    sees a list longer than its capacity.
- Indices are never clamped; an invalid index raises IndexOutOfRangeError and
    leaves the list unchanged.
- Duplicate detection is exact string equality.
"""
# endregion
# region Imports
from typing import Any, Iterator, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..constants import DEFAULT_CAPACITY, MIN_CAPACITY
from ..exceptions import EmptyInputError, IndexOutOfRangeError, InvalidCapacityError


# endregion
# region Pydantic Models
class ClipboardEntry(BaseModel):
    """
    A single saved clipboard snapshot.
    Attributes:
        text (str): The exact clipboard contents; never blank.
    """

    text: str = Field(..., description="The exact clipboard contents")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"examples": [{"text": "Sample clipboard text"}]},
    )

    @field_validator("text")
    def text_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Clipboard entry text must not be empty.")
        return v


class ClipboardListState(BaseModel):
    """
    Persisted state of a ClipboardList.
    Attributes:
        entries (list[str]): Saved texts, most recent first.
        capacity (int): Maximum number of entries retained.
    """

    entries: list[str] = Field(
        default_factory=list, description="Saved texts, most recent first"
    )
    capacity: int = Field(
        DEFAULT_CAPACITY, description="Maximum number of entries retained"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"entries": ["hello", "world"], "capacity": 10}]
        },
    )

    @field_validator("entries", mode="before")
    def drop_invalid_entries(cls, v: Any) -> list[str]:
        # Stored data may be hand-edited; keep the first (most recent) copy of each text.
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            raise ValueError("entries must be a sequence of strings")
        seen: set[str] = set()
        cleaned: list[str] = []
        for item in v:
            if not isinstance(item, str) or not item.strip() or item in seen:
                continue
            seen.add(item)
            cleaned.append(item)
        return cleaned

    @field_validator("capacity", mode="before")
    def clamp_capacity(cls, v: Any) -> int:
        if v is None:
            return DEFAULT_CAPACITY
        try:
            return max(MIN_CAPACITY, int(v))
        except TypeError as e:
            raise ValueError(f"capacity must be an integer, got {v!r}") from e

    @model_validator(mode="after")
    def trim_to_capacity(self) -> "ClipboardListState":
        if len(self.entries) > self.capacity:
            self.entries = self.entries[: self.capacity]
        return self


# endregion
# region ClipboardList Class
class ClipboardList:
    """
    Bounded most-recently-used list of clipboard entries.

    Attributes:
        capacity (int): Maximum number of entries retained (always >= 1).
        entries (tuple[ClipboardEntry, ...]): Current entries, most recent first.
        texts (list[str]): Snapshot of the entry texts, most recent first.

    Example:
        >>> items = ClipboardList(capacity=2)
        >>> items.insert("a")
        ['a']
        >>> items.insert("b")
        ['b', 'a']
        >>> items.insert("a")
        ['a', 'b']
        >>> items.insert("c")
        ['c', 'a']
    """

    __entries: list[ClipboardEntry]
    __capacity: int

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.__capacity = self._validate_capacity(capacity)
        self.__entries = []

    # region Read Access
    @property
    def capacity(self) -> int:
        return self.__capacity

    @property
    def entries(self) -> tuple[ClipboardEntry, ...]:
        return tuple(self.__entries)

    @property
    def texts(self) -> list[str]:
        return [entry.text for entry in self.__entries]

    def __len__(self) -> int:
        return len(self.__entries)

    def __iter__(self) -> Iterator[ClipboardEntry]:
        return iter(tuple(self.__entries))

    def __contains__(self, text: object) -> bool:
        return any(entry.text == text for entry in self.__entries)

    def __repr__(self) -> str:
        return f"<ClipboardList(length={len(self)}, capacity={self.capacity})>"

    def get(self, index: int) -> ClipboardEntry:
        """
        Return the entry at `index`.

        Raises:
            IndexOutOfRangeError: If index < 0 or index >= len(self).
        """
        self._check_index(index)
        return self.__entries[index]

    # endregion
    # region Mutations
    def insert(self, text: str) -> list[str]:
        """
        Save `text` as the most recent entry.

        An entry with the same text is promoted to index 0 rather than duplicated.
        If the list then exceeds its capacity the oldest entries are dropped.

        Arguments:
            text (str): The clipboard text; stored exactly as given.

        Returns:
            list[str]: The new list state, most recent first.

        Raises:
            EmptyInputError: If `text` is empty or whitespace-only.
        """
        if not isinstance(text, str) or not text.strip():
            raise EmptyInputError("Nothing to save: text is empty.")
        entries = [entry for entry in self.__entries if entry.text != text]
        entries.insert(0, ClipboardEntry(text=text))
        self.__entries = entries[: self.__capacity]
        return self.texts

    def remove_at(self, index: int) -> ClipboardEntry:
        """
        Delete the entry at `index`; later entries shift up by one position.

        Returns:
            ClipboardEntry: The removed entry.

        Raises:
            IndexOutOfRangeError: If index < 0 or index >= len(self).
        """
        self._check_index(index)
        entries = list(self.__entries)
        removed = entries.pop(index)
        self.__entries = entries
        return removed

    def set_capacity(self, new_capacity: int) -> list[str]:
        """
        Change the capacity, evicting the oldest entries that no longer fit.

        Raises:
            InvalidCapacityError: If `new_capacity` is not an integer >= 1.
        """
        capacity = self._validate_capacity(new_capacity)
        entries = self.__entries[:capacity]
        self.__capacity = capacity
        self.__entries = entries
        return self.texts

    def clear(self) -> None:
        self.__entries = []

    # endregion
    # region State Conversion
    def to_state(self) -> ClipboardListState:
        return ClipboardListState(entries=self.texts, capacity=self.capacity)

    @classmethod
    def from_state(
        cls, state: Optional[Union[ClipboardListState, Mapping[str, Any]]]
    ) -> "ClipboardList":
        """
        Build a list from persisted state.

        Mappings are validated through ClipboardListState, which drops blank and
        duplicate entries, clamps the capacity and trims to it.

        Raises:
            pydantic.ValidationError: If the stored value cannot be repaired.
        """
        if state is None:
            return cls()
        if not isinstance(state, ClipboardListState):
            state = ClipboardListState.model_validate(state)
        instance = cls(capacity=state.capacity)
        instance.__entries = [ClipboardEntry(text=text) for text in state.entries]
        return instance

    # endregion
    # region Helpers
    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexOutOfRangeError(index, len(self.__entries))
        if index < 0 or index >= len(self.__entries):
            raise IndexOutOfRangeError(index, len(self.__entries))

    @staticmethod
    def _validate_capacity(capacity: int) -> int:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidCapacityError(f"Capacity must be an integer, got {capacity!r}.")
        if capacity < MIN_CAPACITY:
            raise InvalidCapacityError(
                f"Capacity must be at least {MIN_CAPACITY}, got {capacity}."
            )
        return capacity

    # endregion


# endregion

__all__ = ["ClipboardEntry", "ClipboardListState", "ClipboardList"]
