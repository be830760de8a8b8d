"""Customer code value object."""
from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerCode:
    """
    Northwind customer identifier.

    Format: five upper-case alphanumeric characters.
    Examples:
    - ALFKI
    - BONAP
    - WOLZA
    """
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Customer code cannot be empty")

        if len(self.value) != 5:
            raise ValueError(
                f"Customer code must be 5 characters long: {self.value!r}"
            )

        if not self.value.isalnum() or self.value != self.value.upper():
            raise ValueError(
                f"Customer code must be upper-case alphanumeric: {self.value!r}"
            )

    def __str__(self) -> str:
        return self.value
