"""
Animal

This package provides the animal record, its line codec, the file-backed
repository and the role-checked service on top of it.
"""

from farmhand.animal.record import Animal
from farmhand.animal.repository import AnimalRepository, LoadWarning
from farmhand.animal.service import AnimalService

__all__ = ["Animal", "AnimalRepository", "AnimalService", "LoadWarning"]
