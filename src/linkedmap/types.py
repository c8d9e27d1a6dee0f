"""Type definitions for linkedmap."""

from typing import Literal, TypeAlias, TypeVar

# Generic type variable for stored values (which double as their own keys)
K = TypeVar("K")

# Policy for add_new() when the value is already present
DuplicatePolicy: TypeAlias = Literal["ignore", "raise"]

# Policy for remove() when the value is absent
MissingPolicy: TypeAlias = Literal["ignore", "raise"]
