"""
services/export_service.py
---------------------------
Generates CSV and Excel exports of grading results and inventory stock.
"""

import io
from typing import Iterable

import pandas as pd

from models.inventory import ElectronicItem, GroceryItem
from models.student import Student
from utils.logger import get_logger

logger = get_logger(__name__)

_STUDENT_COLUMNS = ["ID", "Name", "Score", "Grade"]


class ExportService:
    """Generates downloadable reports in CSV and Excel formats."""

    @staticmethod
    def _students_frame(students: Iterable[Student]) -> pd.DataFrame:
        data = [
            {"ID": s.id, "Name": s.full_name, "Score": s.score, "Grade": s.grade}
            for s in students
        ]
        return pd.DataFrame(data, columns=_STUDENT_COLUMNS)

    def export_grades_csv(self, students: Iterable[Student]) -> io.BytesIO:
        """
        Export graded students as a CSV file.

        Returns:
            A BytesIO buffer containing the CSV data.
        """
        df = self._students_frame(students)
        buffer = io.BytesIO()
        df.to_csv(buffer, index=False, encoding="utf-8-sig")
        buffer.seek(0)
        logger.info(f"Exported {len(df)} students as CSV")
        return buffer

    def export_grades_excel(self, students: Iterable[Student]) -> io.BytesIO:
        """
        Export graded students as an Excel (.xlsx) file with a second sheet
        counting students per grade.

        Returns:
            A BytesIO buffer containing the Excel data.
        """
        df = self._students_frame(students)

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="Students", index=False)

            if not df.empty:
                summary = df.groupby("Grade")["ID"].count().reset_index()
                summary.columns = ["Grade", "Students"]
                summary.to_excel(writer, sheet_name="Grades", index=False)

        buffer.seek(0)
        logger.info(f"Exported {len(df)} students as Excel")
        return buffer

    def export_inventory_excel(
        self, electronics: Iterable[ElectronicItem], groceries: Iterable[GroceryItem]
    ) -> io.BytesIO:
        """
        Export a stock snapshot, one sheet per item type.

        Returns:
            A BytesIO buffer containing the Excel data.
        """
        electronics_df = pd.DataFrame(
            [
                {"ID": e.id, "Name": e.name, "Quantity": e.quantity,
                 "Brand": e.brand, "Warranty (months)": e.warranty_months}
                for e in electronics
            ],
            columns=["ID", "Name", "Quantity", "Brand", "Warranty (months)"],
        )
        groceries_df = pd.DataFrame(
            [
                {"ID": g.id, "Name": g.name, "Quantity": g.quantity,
                 "Expiry": g.expiry_date.isoformat()}
                for g in groceries
            ],
            columns=["ID", "Name", "Quantity", "Expiry"],
        )

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            electronics_df.to_excel(writer, sheet_name="Electronics", index=False)
            groceries_df.to_excel(writer, sheet_name="Groceries", index=False)

        buffer.seek(0)
        logger.info(
            f"Exported {len(electronics_df)} electronic and {len(groceries_df)} grocery items as Excel"
        )
        return buffer
