import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from farmhand import storage
from farmhand.animal import codec
from farmhand.animal.record import Animal, validate_fields
from farmhand.errors import ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadWarning:
    """A stored line that was skipped while loading."""

    line_number: int
    line: str
    reason: str


class AnimalRepository:
    """
    Repository for animal records backed by a flat text file.

    Holds the full collection in memory, keyed by id in insertion order, and
    rewrites the whole file after every create, update and remove. Callers
    only ever receive copies of the stored animals.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._animals: dict[int, Animal] = {}
        self.next_id = 1
        self.load_warnings: List[LoadWarning] = []

    @classmethod
    def open(cls, path: Path) -> "AnimalRepository":
        """Open the data file at path, creating it empty if missing."""
        repo = cls(path)
        repo.reload()
        return repo

    def reload(self) -> None:
        """
        Rebuild the in-memory collection from the data file.

        Blank lines are ignored. Lines that fail to decode are skipped and
        recorded in load_warnings; they never stop the rest of the file from
        loading. next_id only ever moves forward: it ends up past both the
        highest id in the file and every id this repository has issued.
        """
        animals: dict[int, Animal] = {}
        warnings: List[LoadWarning] = []

        if not storage.exists(self.path):
            storage.create_empty(self.path)
            lines = []
        else:
            lines = storage.read_lines(self.path)

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                animal = codec.decode(line)
            except ParseError as e:
                logger.warning("Skipping line %d of %s: %s", line_number, self.path, e)
                warnings.append(LoadWarning(line_number, line, str(e)))
                continue
            if animal.id in animals:
                # Last line wins; the record keeps its first position.
                logger.warning("Line %d of %s repeats id %d", line_number, self.path, animal.id)
            animals[animal.id] = animal

        self._animals = animals
        # Ids stay positive and are never handed out twice, even across reloads.
        self.next_id = max(self.next_id, max(animals, default=0) + 1, 1)
        self.load_warnings = warnings
        logger.info(
            "Loaded %d animals from %s (%d lines skipped)",
            len(animals),
            self.path,
            len(warnings),
        )

    def __len__(self) -> int:
        return len(self._animals)

    def __contains__(self, animal_id: int) -> bool:
        return animal_id in self._animals

    def list(self) -> List[Animal]:
        """List all animals in insertion order."""
        return [animal.copy() for animal in self._animals.values()]

    def get_by_id(self, animal_id: int) -> Optional[Animal]:
        """Get an animal by ID."""
        animal = self._animals.get(animal_id)
        return animal.copy() if animal else None

    def create(self, name: str, age: int, species: str) -> Animal:
        """Create a new animal with the next free ID and persist it."""
        validate_fields(name, age, species)

        animal = Animal(id=self.next_id, name=name, age=age, species=species)
        self.next_id += 1

        snapshot = dict(self._animals)
        self._animals[animal.id] = animal
        self._persist(snapshot)

        logger.info("Created animal %d (%s)", animal.id, animal.name)
        return animal.copy()

    def remove(self, animal_id: int) -> bool:
        """Remove an animal. Returns False if no animal has that ID."""
        if animal_id not in self._animals:
            return False

        snapshot = dict(self._animals)
        del self._animals[animal_id]
        self._persist(snapshot)

        logger.info("Removed animal %d", animal_id)
        return True

    def update(self, animal_id: int, mutation: Callable[[Animal], None]) -> bool:
        """
        Apply mutation to the animal with the given ID and persist the result.

        The mutation receives a working copy and changes its fields in place.
        The stored record is only replaced once the mutated copy has been
        validated, so a mutation that raises leaves the repository untouched.

        Returns:
            False if no animal has that ID, True once the change is on disk

        Raises:
            ValueError: if the mutation changes the id or leaves invalid fields
        """
        current = self._animals.get(animal_id)
        if current is None:
            return False

        working = current.copy()
        mutation(working)
        if working.id != animal_id:
            raise ValueError(f"Animal id cannot be changed (was {animal_id}, got {working.id})")
        validate_fields(working.name, working.age, working.species)

        snapshot = dict(self._animals)
        self._animals[animal_id] = working
        self._persist(snapshot)

        logger.info("Updated animal %d", animal_id)
        return True

    def _persist(self, snapshot: dict[int, Animal]) -> None:
        """
        Rewrite the data file from the in-memory collection.

        On any failure the collection is restored from snapshot before the
        error propagates, so memory keeps matching the file.
        """
        try:
            storage.write_lines(self.path, [codec.encode(a) for a in self._animals.values()])
        except BaseException:
            self._animals = snapshot
            raise
        logger.debug("Wrote %d animals to %s", len(self._animals), self.path)
