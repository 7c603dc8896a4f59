#!/usr/bin/env python3
"""Farmhand interactive shell."""

import argparse
from typing import Callable, Optional

import questionary
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from farmhand.account import Account, AccountService
from farmhand.animal import Animal, AnimalRepository, AnimalService
from farmhand.config import config
from farmhand.errors import InvalidLoginError, PermissionDeniedError, StorageError
from farmhand.log import configure_logging

console = Console()

LOGOUT = "Logout"


def parse_id(text: Optional[str]) -> Optional[int]:
    """Parse a user-entered animal ID, returning None if it is not an integer."""
    try:
        return int((text or "").strip())
    except ValueError:
        return None


def ask_id(message: str) -> Optional[int]:
    """Prompt for an animal ID. Prints a notice and returns None on bad input."""
    answer = questionary.text(message).ask()
    if answer is None:
        return None
    animal_id = parse_id(answer)
    if animal_id is None:
        console.print("[red]Invalid ID format. Must be integer.[/]")
    return animal_id


def validate_age(text: str):
    try:
        age = int(text.strip())
    except ValueError:
        return "Invalid age. Enter a positive integer (0 or greater)."
    return True if age >= 0 else "Invalid age. Enter a positive integer (0 or greater)."


def login(account_service: AccountService) -> Optional[Account]:
    """Prompt for credentials. Returns None if the user cancels."""
    username = questionary.text("Enter username:").ask()
    if username is None:
        return None
    password = questionary.password("Enter password:").ask()
    if password is None:
        return None
    return account_service.authenticate(username, password)


# =============================================================================
# Menu Actions
# =============================================================================


def show_animals(animals: list[Animal]) -> None:
    """Print animals as a table."""
    if not animals:
        console.print("[yellow]No animals found.[/]")
        return

    table = Table(title="Animals")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Age", justify="right")
    table.add_column("Species")
    for a in animals:
        table.add_row(str(a.id), escape(a.name), str(a.age), escape(a.species))
    console.print(table)


def list_animals(service: AnimalService) -> None:
    show_animals(service.list_animals())


def view_animal(service: AnimalService) -> None:
    """Show one animal's details by ID."""
    animal_id = ask_id("Enter animal ID:")
    if animal_id is None:
        return

    animal = service.get_animal(animal_id)
    if animal is None:
        console.print(f"[red]No animal found with ID {animal_id}.[/]")
    else:
        console.print(escape(str(animal)))


def add_animal(service: AnimalService) -> None:
    """Prompt for a new animal's details and store it."""
    console.print("Adding new animal. Fill details:")

    name = questionary.text(
        "Name:", validate=lambda t: bool(t.strip()) or "Name cannot be empty."
    ).ask()
    if name is None:
        return
    age = questionary.text("Age (positive integer):", validate=validate_age).ask()
    if age is None:
        return
    species = questionary.text(
        "Species:", validate=lambda t: bool(t.strip()) or "Species cannot be empty."
    ).ask()
    if species is None:
        return

    animal = service.add_animal(name=name.strip(), age=int(age.strip()), species=species.strip())
    console.print(f"[green]Added animal with ID {animal.id}.[/]")


def remove_animal(service: AnimalService) -> None:
    animal_id = ask_id("Enter ID of animal to remove:")
    if animal_id is None:
        return

    if service.remove_animal(animal_id):
        console.print(f"[green]Animal {animal_id} removed.[/]")
    else:
        console.print(f"[red]No animal found with ID {animal_id}.[/]")


def update_animal(service: AnimalService) -> None:
    """Prompt for new field values; blank answers keep the current value."""
    animal_id = ask_id("Enter ID of animal to update:")
    if animal_id is None:
        return

    current = service.get_animal(animal_id)
    if current is None:
        console.print(f"[red]No animal found with ID {animal_id}.[/]")
        return

    console.print("[dim]Leave field blank to keep current value.[/]")
    console.print(f"Current: {escape(str(current))}")

    new_name = questionary.text("New name:").ask()
    new_age = questionary.text("New age:").ask()
    new_species = questionary.text("New species:").ask()
    if new_name is None or new_age is None or new_species is None:
        console.print("[dim]Cancelled.[/]")
        return

    age = None
    if new_age.strip():
        # An invalid age is ignored rather than rejected
        parsed = parse_id(new_age)
        if parsed is not None and parsed >= 0:
            age = parsed

    ok = service.update_animal(
        animal_id,
        name=new_name.strip() or None,
        age=age,
        species=new_species.strip() or None,
    )
    if ok:
        console.print("[green]Animal updated.[/]")
    else:
        console.print("[red]Failed to update animal.[/]")


ADMIN_MENU: dict[str, Callable[[AnimalService], None]] = {
    "Add animal": add_animal,
    "Remove animal": remove_animal,
    "List animals": list_animals,
    "Update animal": update_animal,
}

FARMER_MENU: dict[str, Callable[[AnimalService], None]] = {
    "View animals": list_animals,
    "View animal details by ID": view_animal,
}


def run_menu(service: AnimalService, title: str, actions: dict) -> None:
    """Loop over a menu until the user logs out or cancels."""
    while True:
        choice = questionary.select(
            f"--- {title} ---",
            choices=[*actions, LOGOUT],
        ).ask()

        # User pressed Ctrl+C or Escape
        if choice is None or choice == LOGOUT:
            return

        try:
            actions[choice](service)
        except (StorageError, PermissionDeniedError, ValueError) as e:
            console.print(f"[red]Error: {escape(str(e))}[/]")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Farm management shell")
    parser.add_argument(
        "--data-file",
        default=str(config.data_file),
        help=f"Animal data file (default: {config.data_file})",
    )
    parser.add_argument("--log-level", default=config.log_level, help="Logging level")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    console.print("[bold]=== Farm Management System ===[/]")

    status = 0
    try:
        repository = AnimalRepository.open(args.data_file)
        if repository.load_warnings:
            console.print(
                f"[yellow]Skipped {len(repository.load_warnings)} unreadable line(s) "
                f"in {escape(str(repository.path))}.[/]"
            )

        account = login(AccountService(config))
        if account is not None:
            console.print(f"Welcome, {escape(account.display_name)}.")
            service = AnimalService(repository, account)
            if account.can_manage:
                run_menu(service, "Admin Menu", ADMIN_MENU)
            else:
                run_menu(service, "Farmer Menu", FARMER_MENU)
    except InvalidLoginError as e:
        console.print(f"[red]Login failed: {e}[/]")
        status = 1
    except Exception as e:
        console.print(f"[red]Unexpected error: {escape(str(e))}[/]")
        status = 1

    console.print("Exiting application. Goodbye.")
    return status


if __name__ == "__main__":
    raise SystemExit(main())
