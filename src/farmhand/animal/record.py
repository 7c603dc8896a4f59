from dataclasses import dataclass, replace


@dataclass
class Animal:
    """A single animal held by the farm."""

    id: int
    name: str
    age: int
    species: str

    def __str__(self) -> str:
        return f"ID: {self.id}, Name: {self.name}, Age: {self.age}, Species: {self.species}"

    def copy(self) -> "Animal":
        """Return a detached copy of this animal."""
        return replace(self)


def validate_fields(name: str, age: int, species: str) -> None:
    """
    Check the caller-controlled fields of an animal.

    Raises:
        ValueError: if name or species is blank, spans several lines or
            cannot be stored as UTF-8, or age is not a non-negative integer.
    """
    for label, value in (("name", name), ("species", species)):
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"Animal {label} cannot be empty")
        if "\n" in value or "\r" in value:
            raise ValueError(f"Animal {label} cannot contain line breaks")
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError(f"Animal {label} is not valid text: {value!r}") from None

    if isinstance(age, bool) or not isinstance(age, int):
        raise ValueError(f"Animal age must be an integer, got {age!r}")
    if age < 0:
        raise ValueError(f"Animal age cannot be negative, got {age}")
