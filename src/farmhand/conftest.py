# src/farmhand/conftest.py
"""
Pytest configuration and shared fixtures.

Tests are co-located with implementation files using the *_test.py suffix.
This file provides fixtures available to all tests in the package.
"""

import os

# Set environment BEFORE importing any app modules
os.environ["FARMHAND_ENV"] = "test"

from pathlib import Path

import pytest

from farmhand.account import Account, Role
from farmhand.config import Config

# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture
def data_file(tmp_path) -> Path:
    """Path to a data file that does not exist yet."""
    return tmp_path / "animals.txt"


@pytest.fixture
def write_data_file(data_file):
    """
    Write raw lines to the data file before opening a repository on it.

    Usage:
        write_data_file(["1,Bessie,4,Cow", "garbage"])
    """

    def _write(lines: list[str]) -> Path:
        data_file.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return data_file

    return _write


# =============================================================================
# Repository Fixtures
# =============================================================================


@pytest.fixture
def animal_repo(data_file):
    """Provide an AnimalRepository on an empty data file."""
    from farmhand.animal import AnimalRepository

    return AnimalRepository.open(data_file)


@pytest.fixture
def sample_animals(animal_repo) -> list:
    """Create a few animals in the repository."""
    animals = [
        {"name": "Bessie", "age": 4, "species": "Cow"},
        {"name": "Wilbur", "age": 1, "species": "Pig"},
        {"name": "Dolly", "age": 6, "species": "Sheep"},
    ]

    return [animal_repo.create(**a) for a in animals]


# =============================================================================
# Account Fixtures
# =============================================================================


@pytest.fixture
def test_config(data_file) -> Config:
    """Config with known credentials, independent of the environment."""
    return Config(
        environment="test",
        data_file=data_file,
        log_level="DEBUG",
        admin_username="admin",
        admin_password="admin123",
        farmer_username="farmer1",
        farmer_password="farmer123",
    )


@pytest.fixture
def admin_account() -> Account:
    return Account("admin", "Administrator", Role.ADMIN)


@pytest.fixture
def farmer_account() -> Account:
    return Account("farmer1", "Farmer John", Role.FARMER)


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def admin_service(animal_repo, admin_account):
    """Provide an AnimalService acting as the administrator."""
    from farmhand.animal import AnimalService

    return AnimalService(animal_repo, admin_account)


@pytest.fixture
def farmer_service(animal_repo, farmer_account):
    """Provide an AnimalService acting as a farmer."""
    from farmhand.animal import AnimalService

    return AnimalService(animal_repo, farmer_account)
