"""End-to-end tests for the ``prodcat`` command via click's CliRunner."""

import pytest
from click.testing import CliRunner

from prodcat.infrastructure.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def _script(*lines: str) -> str:
    return "\n".join(lines) + "\n"


class TestCli:

    def test_add_list_search_quit(self, runner):
        result = runner.invoke(
            cli,
            ["--no-color", "--no-clear"],
            input=_script(
                "Electronics", "Laptop", "1200",
                "Electronics", "Phone", "900",
                "Accessories", "Mouse", "50",
                "q",
                "S", "PHONE",
                "q",
            ),
        )

        assert result.exit_code == 0, result.output
        out = result.stdout
        assert out.count("The product was successfully added!") == 3
        assert out.index("Mouse") < out.index("Phone") < out.index("Laptop")
        assert "Total amount: $2150.00" in out
        assert 'To search for a product - enter: "S"' in out

    def test_invalid_input_is_recovered(self, runner):
        result = runner.invoke(
            cli,
            ["--no-color"],
            input=_script("", "Books", "Dune", "-1", "abc", "9.99", "q", "z", "q"),
        )

        assert result.exit_code == 0
        assert "Input cannot be empty. Please try again." in result.stdout
        assert result.stdout.count("Invalid price. Please enter a positive number.") == 2
        assert "Invalid choice. Please try again." in result.stdout
        assert "Total amount: $9.99" in result.stdout

    def test_search_without_match(self, runner):
        result = runner.invoke(cli, ["--no-color"], input=_script("q", "s", "Tablet", "q"))
        assert result.exit_code == 0
        assert "No products found matching 'Tablet'." in result.stdout

    def test_end_of_input_exits_cleanly(self, runner):
        result = runner.invoke(cli, ["--no-color"], input="Books\n")
        assert result.exit_code == 0

    def test_currency_from_environment(self, runner):
        result = runner.invoke(
            cli,
            ["--no-color"],
            input=_script("Books", "Dune", "5", "q", "q"),
            env={"PRODCAT_CURRENCY": "eur"},
        )
        assert result.exit_code == 0
        assert "Total amount: 5.00 EUR" in result.stdout

    def test_bad_log_level_rejected(self, runner):
        result = runner.invoke(cli, ["--log-level", "LOUD"], input="")
        assert result.exit_code == 2
