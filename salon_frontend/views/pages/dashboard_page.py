# salon_frontend/views/pages/dashboard_page.py
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QTabWidget, QMessageBox
)
from PySide6.QtCore import Signal

from salon_frontend.services import api_client
from salon_frontend.services.session_service import AuthSession
from salon_frontend.views.widgets.records_table import RecordsTable


class DashboardPage(QWidget):
    """Owner view: bookings, staff, services and expenses of the salon."""
    logout_requested = Signal()

    def __init__(self, session: AuthSession):
        super().__init__()
        self.session = session

        layout = QVBoxLayout(self)
        top = QHBoxLayout()
        self.lbl_title = QLabel("Dashboard")
        self.lbl_title.setStyleSheet("font-size:22px; font-weight:800;")
        btn_refresh = QPushButton("Refresh")
        btn_logout = QPushButton("Log out")
        top.addWidget(self.lbl_title)
        top.addStretch()
        top.addWidget(btn_refresh)
        top.addWidget(btn_logout)
        layout.addLayout(top)

        self.tabs = QTabWidget()
        self.tbl_bookings = RecordsTable([
            ("Date", "bookingDate"), ("Time", "bookingTime"), ("Client", "clientName"),
            ("Status", "status"), ("Employee", "employeeId"),
        ])
        self.tbl_employees = RecordsTable([
            ("Name", "name"), ("Position", "position"), ("Email", "email"), ("Status", "status"),
        ])
        self.tbl_services = RecordsTable([
            ("Service", "name"), ("Duration", "duration"), ("Price", "price"), ("Category", "category"),
        ])
        self.tbl_expenses = RecordsTable([
            ("Date", "date"), ("Name", "name"), ("Category", "category"), ("Amount", "amount"),
        ])
        self.tabs.addTab(self.tbl_bookings, "Bookings")
        self.tabs.addTab(self.tbl_employees, "Employees")
        self.tabs.addTab(self.tbl_services, "Services")
        self.tabs.addTab(self.tbl_expenses, "Expenses")
        layout.addWidget(self.tabs)

        btn_cancel = QPushButton("Cancel selected booking")
        btn_cancel.clicked.connect(self._cancel_selected)
        layout.addWidget(btn_cancel)

        btn_refresh.clicked.connect(self.reload)
        btn_logout.clicked.connect(self.logout_requested.emit)

    def reload(self):
        token = self.session.token
        if not token:
            return
        try:
            self.tbl_bookings.set_records(api_client.get_bookings(token))
            self.tbl_employees.set_records(api_client.get_employees())
            self.tbl_services.set_records(api_client.get_services())
            self.tbl_expenses.set_records(api_client.get_expenses(token))
        except RuntimeError as e:
            QMessageBox.warning(self, "Error", str(e))

    def _cancel_selected(self):
        booking = self.tbl_bookings.selected_record()
        if not booking:
            return
        try:
            api_client.cancel_booking(booking["id"], token=self.session.token)
        except RuntimeError as e:
            QMessageBox.warning(self, "Error", str(e))
            return
        self.reload()
