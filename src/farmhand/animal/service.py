import logging
from typing import List, Optional

from farmhand.account import Account
from farmhand.animal.record import Animal
from farmhand.animal.repository import AnimalRepository
from farmhand.errors import PermissionDeniedError

logger = logging.getLogger(__name__)


class AnimalService:
    """
    Animal operations on behalf of a logged-in account.

    Checks the account's role before touching the repository; the repository
    itself knows nothing about who is calling.
    """

    def __init__(self, repository: AnimalRepository, account: Account):
        self.repository = repository
        self.account = account

    def _require(self, allowed: bool, action: str) -> None:
        if not allowed:
            logger.warning(
                "User %s (%s) may not %s",
                self.account.username,
                self.account.role.value,
                action,
            )
            raise PermissionDeniedError(
                f"{self.account.display_name} is not allowed to {action}."
            )

    def list_animals(self) -> List[Animal]:
        self._require(self.account.can_view, "view animals")
        return self.repository.list()

    def get_animal(self, animal_id: int) -> Optional[Animal]:
        self._require(self.account.can_view, "view animals")
        return self.repository.get_by_id(animal_id)

    def add_animal(self, name: str, age: int, species: str) -> Animal:
        self._require(self.account.can_manage, "add animals")
        return self.repository.create(name=name, age=age, species=species)

    def remove_animal(self, animal_id: int) -> bool:
        self._require(self.account.can_manage, "remove animals")
        return self.repository.remove(animal_id)

    def update_animal(
        self,
        animal_id: int,
        name: str = None,
        age: int = None,
        species: str = None,
    ) -> bool:
        """
        Change the given fields of an animal, leaving the others as they are.

        Returns False if no animal has that ID.
        """
        self._require(self.account.can_manage, "update animals")

        def apply(animal: Animal) -> None:
            if name is not None:
                animal.name = name
            if age is not None:
                animal.age = age
            if species is not None:
                animal.species = species

        return self.repository.update(animal_id, apply)
