"""Tests for the console helper, the handlers and the menu loop, driven by scripted input."""

from decimal import Decimal

import pytest

import main
from handlers import grading_handler, inventory_handler
from handlers.finance_handler import run_finance
from handlers.grading_handler import run_grading
from handlers.healthcare_handler import run_healthcare
from handlers.inventory_handler import run_inventory, run_warehouse
from utils.console import Console


class Script:
    """Feeds canned answers to Console and records everything printed."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def read(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text):
        self.output.append(text)

    @property
    def console(self):
        return Console(read=self.read, write=self.write)

    @property
    def text(self):
        return "\n".join(self.output)


class TestConsole:
    def test_ask_int_retries_until_integer(self):
        script = Script("abc", "", "7")
        assert script.console.ask_int("ID: ") == 7
        assert script.prompts[1:] == ["Invalid input. Please enter a number: "] * 2

    def test_ask_int_accept(self):
        assert Script("3", "1").console.ask_int("n: ", accept=lambda v: v in (1, 2)) == 1

    def test_ask_decimal_rejects_nan_and_negative(self):
        script = Script("nan", "-1", "12.50")
        assert script.console.ask_decimal("x: ", accept=lambda v: v > 0) == Decimal("12.50")

    def test_ask_default_on_blank_and_eof(self):
        assert Script("  ").console.ask("q: ", default="d") == "d"
        assert Script().console.ask("q: ", default="d") == "d"


def test_healthcare_flow():
    script = Script("x", "1", "99", "0")
    run_healthcare(script.console)

    assert "1: John Doe, 35, Male" in script.output
    assert "\nPrescriptions for John Doe:" in script.output
    assert any(line.startswith("- Ibuprofen") for line in script.output)
    assert "Patient with ID 99 not found." in script.output


def test_finance_flow():
    script = Script("ACC9", "-5", "100", "30", "Food", "50", "Rent", "40", "Fun")
    service = run_finance(script.console)

    assert service.account.balance == Decimal("20")
    assert len(service.history()) == 3
    assert "Insufficient funds - transaction cancelled" in script.text
    assert "Account: ACC9" in script.output


def test_inventory_flow(monkeypatch, tmp_path):
    monkeypatch.setattr(inventory_handler, "EXPORT_DIR", str(tmp_path))
    script = Script("1", "1", "1", "5", "y")
    manager = run_inventory(script.console)

    assert manager.electronics.get_by_id(1).value.quantity == 15
    assert "Stock updated for Laptop. New quantity: 15" in script.output
    assert "Expected error: ElectronicItem with ID 1 already exists" in script.output
    assert "Expected error: GroceryItem with ID 999 not found" in script.output
    assert "Expected error: Quantity cannot be negative" in script.output
    assert list(tmp_path.glob("inventory_*.xlsx"))


def test_inventory_remove_unknown():
    script = Script("2", "2", "555", "n")
    run_inventory(script.console)
    assert "Error: GroceryItem with ID 555 not found" in script.output


def test_warehouse_flow():
    script = Script(
        "2",
        "1", "Camera", "3", "Canon", "12",
        "1", "Camera again", "1", "Nikon", "6",
        "1",
        "7", "Rice", "20", "not-a-date", "2030-01-01",
    )
    manager = run_warehouse(script.console)

    assert len(manager.electronics) == 1
    assert manager.electronics.get_by_id(1).value.brand == "Canon"
    assert "Error: ElectronicItem with ID 1 already exists" in script.output
    assert "Invalid date. Use yyyy-mm-dd." in script.output
    assert str(manager.groceries.get_by_id(7).value.expiry_date) == "2030-01-01"


def test_grading_flow_with_sample(monkeypatch, tmp_path):
    monkeypatch.setattr(grading_handler, "GRADES_INPUT_PATH", str(tmp_path / "students.txt"))
    monkeypatch.setattr(grading_handler, "EXPORT_DIR", str(tmp_path / "exports"))
    report_path = tmp_path / "report.txt"
    script = Script("", str(report_path), "y")

    report = run_grading(script.console)

    assert len(report.students) == 6
    assert "Skipping line 6: Invalid score format 'abc'" in script.output
    assert "  ... and 3 more" in script.output
    assert report_path.read_text(encoding="utf-8").startswith("John Doe (ID: 101)")
    assert (tmp_path / "exports" / "report.csv").exists()


def test_grading_missing_input(tmp_path):
    script = Script(str(tmp_path / "missing.txt"), str(tmp_path / "out.txt"))
    assert run_grading(script.console) is None
    assert any(line.startswith("Error: Input file not found") for line in script.output)


class TestMenu:
    def test_invalid_then_exit(self):
        script = Script("9", "6")
        main.run_menu(script.console)
        assert "Invalid choice. Please try again." in script.output
        assert script.output[-1] == "Exiting program..."

    def test_failure_returns_to_menu(self, monkeypatch):
        def broken(console):
            raise RuntimeError("kaboom")

        monkeypatch.setitem(main.MENU, "1", ("Broken", broken))
        script = Script("1", "", "6")
        main.run_menu(script.console)
        assert "Unexpected error: kaboom" in script.output
        assert script.output[-1] == "Exiting program..."

    @pytest.mark.parametrize("answers", [(), ("2",)])
    def test_end_of_input_exits(self, answers):
        script = Script(*answers)
        main.run_menu(script.console)
        assert "Exiting program" in script.text


def test_warehouse_without_item_one():
    script = Script("0", "0")
    manager = run_warehouse(script.console)

    assert "Expected error: " not in script.output
    assert "No error raised; the change was undone." in script.output
    assert "Expected error: GroceryItem with ID 999 not found" in script.output
    assert "Expected error: Quantity cannot be negative" in script.output
    assert manager.electronics.list_all() == []
