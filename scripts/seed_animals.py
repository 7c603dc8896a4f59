"""Seed demo animals into the data file."""
from farmhand.animal import AnimalRepository
from farmhand.config import config

INITIAL_ANIMALS = [
    {"name": "Bessie", "age": 4, "species": "Cow"},
    {"name": "Wilbur", "age": 1, "species": "Pig"},
    {"name": "Dolly", "age": 6, "species": "Sheep"},
    {"name": "Clucky, Jr.", "age": 2, "species": "Chicken"},
]


def main():
    animal_repo = AnimalRepository.open(config.data_file)
    existing_names = {a.name for a in animal_repo.list()}

    for animal in INITIAL_ANIMALS:
        if animal["name"] in existing_names:
            print(f"Skipping {animal['name']} - already exists")
            continue

        result = animal_repo.create(**animal)
        print(f"Created: {result.name} (id={result.id})")


if __name__ == "__main__":
    main()
