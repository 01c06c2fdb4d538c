# salon_frontend/views/widgets/records_table.py
from typing import Any, Dict, List, Sequence, Tuple

from PySide6.QtWidgets import QTableWidget, QTableWidgetItem, QHeaderView, QAbstractItemView
from PySide6.QtCore import Qt


class RecordsTable(QTableWidget):
    """Read-only table over a list of API records; columns are (title, key) pairs."""

    def __init__(self, columns: Sequence[Tuple[str, str]], parent=None):
        super().__init__(0, len(columns), parent)
        self.columns = list(columns)
        self.records: List[Dict[str, Any]] = []
        self.setHorizontalHeaderLabels([title for title, _ in self.columns])
        self.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.verticalHeader().setVisible(False)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.setSelectionMode(QAbstractItemView.SingleSelection)

    def set_records(self, records: List[Dict[str, Any]]):
        self.records = list(records)
        self.setRowCount(len(self.records))
        for row, rec in enumerate(self.records):
            for col, (_title, key) in enumerate(self.columns):
                value = rec.get(key)
                item = QTableWidgetItem("" if value is None else str(value))
                item.setTextAlignment(Qt.AlignCenter)
                self.setItem(row, col, item)

    def selected_record(self):
        row = self.currentRow()
        if 0 <= row < len(self.records):
            return self.records[row]
        return None
