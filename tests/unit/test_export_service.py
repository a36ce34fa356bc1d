"""Unit tests for CSV/Excel exports."""

from datetime import date

import pandas as pd
import pytest

from models.inventory import ElectronicItem, GroceryItem
from models.student import Student
from services.export_service import ExportService


@pytest.fixture
def students():
    return [Student(101, "John Doe", 85), Student(102, "Jane Smith", 72), Student(103, "Alice", 91)]


class TestExportService:
    def test_grades_csv(self, students):
        df = pd.read_csv(ExportService().export_grades_csv(students), encoding="utf-8-sig")
        assert list(df.columns) == ["ID", "Name", "Score", "Grade"]
        assert df["Grade"].tolist() == ["A", "B", "A"]

    def test_grades_excel_has_summary(self, students):
        sheets = pd.read_excel(ExportService().export_grades_excel(students), sheet_name=None)
        assert set(sheets) == {"Students", "Grades"}
        summary = dict(zip(sheets["Grades"]["Grade"], sheets["Grades"]["Students"]))
        assert summary == {"A": 2, "B": 1}

    def test_grades_excel_empty(self):
        sheets = pd.read_excel(ExportService().export_grades_excel([]), sheet_name=None)
        assert set(sheets) == {"Students"}

    def test_inventory_excel(self):
        buffer = ExportService().export_inventory_excel(
            [ElectronicItem(1, "Laptop", 10, "Dell", 24)],
            [GroceryItem(101, "Milk", 50, date(2024, 1, 8))],
        )
        sheets = pd.read_excel(buffer, sheet_name=None)
        assert sheets["Electronics"]["Brand"].tolist() == ["Dell"]
        assert sheets["Groceries"]["Expiry"].tolist() == ["2024-01-08"]
