"""
Tests for the interactive shell, with prompts answered by mocks.

Run with: pytest src/farmhand/cli_test.py -v
"""
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from farmhand import cli


@pytest.fixture
def console():
    """Swap the shell's console for one that records output."""
    recording = Console(record=True, width=200, force_terminal=False)
    with patch("farmhand.cli.console", recording):
        yield recording


@pytest.fixture
def prompts():
    """
    Replace questionary with a mock.

    Set answers with:
        prompts.text.return_value.ask.side_effect = [...]
        prompts.password.return_value.ask.return_value = "..."
        prompts.select.return_value.ask.side_effect = [...]
    """
    mock_questionary = MagicMock()
    with patch("farmhand.cli.questionary", mock_questionary), patch("farmhand.cli.configure_logging"):
        yield mock_questionary


def run_shell(prompts, data_file, password, texts, selections) -> int:
    prompts.text.return_value.ask.side_effect = texts
    prompts.password.return_value.ask.return_value = password
    prompts.select.return_value.ask.side_effect = selections
    return cli.main(["--data-file", str(data_file)])


class TestParseId:
    """Tests for cli.parse_id()"""

    @pytest.mark.parametrize("text,expected", [
        ("1", 1),
        (" 42 ", 42),
        ("abc", None),
        ("", None),
        (None, None),
        ("1.5", None),
    ])
    def test_parse_id(self, text, expected):
        assert cli.parse_id(text) == expected


class TestValidateAge:
    """Tests for cli.validate_age()"""

    @pytest.mark.parametrize("text,ok", [
        ("0", True),
        ("12", True),
        ("-1", False),
        ("old", False),
        ("", False),
    ])
    def test_validate_age(self, text, ok):
        assert (cli.validate_age(text) is True) == ok


class TestLogin:
    """Login outcomes"""

    def test_invalid_login(self, console, prompts, data_file):
        status = run_shell(prompts, data_file, "wrong", ["admin"], [])

        output = console.export_text()
        assert status == 1
        assert "Login failed: Invalid username or password." in output
        assert "Exiting application. Goodbye." in output
        prompts.select.assert_not_called()

    def test_cancelled_login(self, console, prompts, data_file):
        status = run_shell(prompts, data_file, None, [None], [])

        assert status == 0
        assert "Exiting application. Goodbye." in console.export_text()
        prompts.password.assert_not_called()


class TestAdminMenu:
    """Admin actions through the shell"""

    def test_add_and_list(self, console, prompts, data_file):
        status = run_shell(
            prompts,
            data_file,
            "admin123",
            ["admin", "Bessie", "4", "Cow"],
            ["Add animal", "List animals", "Logout"],
        )

        output = console.export_text()
        assert status == 0
        assert "Welcome, Administrator." in output
        assert "Added animal with ID 1." in output
        assert "Bessie" in output
        assert data_file.read_text() == "1,Bessie,4,Cow\n"

    def test_list_empty(self, console, prompts, data_file):
        run_shell(prompts, data_file, "admin123", ["admin"], ["List animals", "Logout"])

        assert "No animals found." in console.export_text()

    def test_remove(self, console, prompts, write_data_file):
        data_file = write_data_file(["1,Bessie,4,Cow", "2,Wilbur,1,Pig"])

        run_shell(prompts, data_file, "admin123", ["admin", "1", "1"], ["Remove animal", "Remove animal", "Logout"])

        output = console.export_text()
        assert "Animal 1 removed." in output
        assert "No animal found with ID 1." in output
        assert data_file.read_text() == "2,Wilbur,1,Pig\n"

    def test_remove_bad_id(self, console, prompts, data_file):
        run_shell(prompts, data_file, "admin123", ["admin", "abc"], ["Remove animal", "Logout"])

        assert "Invalid ID format. Must be integer." in console.export_text()

    @pytest.mark.parametrize("answers,expected", [
        (["", "7", ""], "1,Bessie,7,Cow\n"),
        (["Daisy", "", "  "], "1,Daisy,4,Cow\n"),
        (["", "abc", "Bull"], "1,Bessie,4,Bull\n"),
        (["", "-3", ""], "1,Bessie,4,Cow\n"),
    ])
    def test_update_blank_keeps_value(self, console, prompts, write_data_file, answers, expected):
        data_file = write_data_file(["1,Bessie,4,Cow"])

        run_shell(prompts, data_file, "admin123", ["admin", "1", *answers], ["Update animal", "Logout"])

        output = console.export_text()
        assert "Current: ID: 1, Name: Bessie, Age: 4, Species: Cow" in output
        assert "Animal updated." in output
        assert data_file.read_text() == expected

    def test_update_not_found(self, console, prompts, data_file):
        run_shell(prompts, data_file, "admin123", ["admin", "5"], ["Update animal", "Logout"])

        assert "No animal found with ID 5." in console.export_text()

    def test_storage_error_keeps_menu_running(self, console, prompts, data_file):
        with patch("farmhand.storage.os.replace", side_effect=PermissionError(13, "Permission denied")):
            status = run_shell(
                prompts,
                data_file,
                "admin123",
                ["admin", "Bessie", "4", "Cow"],
                ["Add animal", "List animals", "Logout"],
            )

        output = console.export_text()
        assert status == 0
        assert "Error: Cannot write data file" in output
        assert "No animals found." in output


class TestFarmerMenu:
    """Farmer actions through the shell"""

    def test_view_details(self, console, prompts, write_data_file):
        data_file = write_data_file(["1,Bessie,4,Cow", "2,Wilbur,1,Pig"])

        run_shell(
            prompts,
            data_file,
            "farmer123",
            ["farmer1", "2", "9"],
            ["View animal details by ID", "View animal details by ID", "Logout"],
        )

        output = console.export_text()
        assert "ID: 2, Name: Wilbur, Age: 1, Species: Pig" in output
        assert "No animal found with ID 9." in output

    def test_menu_has_no_management_actions(self, console, prompts, data_file):
        run_shell(prompts, data_file, "farmer123", ["farmer1"], [None])

        choices = prompts.select.call_args.kwargs["choices"]
        assert choices == ["View animals", "View animal details by ID", "Logout"]


class TestLoadWarnings:
    def test_notice_for_skipped_lines(self, console, prompts, write_data_file):
        data_file = write_data_file(["1,Bessie,4,Cow", "broken"])

        run_shell(prompts, data_file, "admin123", ["admin"], ["Logout"])

        assert "Skipped 1 unreadable line(s)" in console.export_text()
