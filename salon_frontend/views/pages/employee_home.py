# salon_frontend/views/pages/employee_home.py
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QMessageBox
)
from PySide6.QtCore import Signal

from salon_frontend.services import api_client
from salon_frontend.services.session_service import AuthSession
from salon_frontend.views.widgets.records_table import RecordsTable


class EmployeeHome(QWidget):
    logout_requested = Signal()

    def __init__(self, session: AuthSession):
        super().__init__()
        self.session = session
        self.employee = None

        layout = QVBoxLayout(self)
        top = QHBoxLayout()
        self.lbl_title = QLabel("My schedule")
        self.lbl_title.setStyleSheet("font-size:22px; font-weight:800;")
        btn_logout = QPushButton("Log out")
        btn_logout.clicked.connect(self.logout_requested.emit)
        top.addWidget(self.lbl_title)
        top.addStretch()
        top.addWidget(btn_logout)
        layout.addLayout(top)

        layout.addWidget(QLabel("Bookings"))
        self.tbl_bookings = RecordsTable([
            ("Date", "bookingDate"), ("Time", "bookingTime"), ("Client", "clientName"), ("Status", "status"),
        ])
        layout.addWidget(self.tbl_bookings)

        layout.addWidget(QLabel("Weekly availability"))
        self.tbl_availability = RecordsTable([
            ("Day", "dayOfWeek"), ("From", "startTime"), ("To", "endTime"), ("Service", "serviceId"),
        ])
        layout.addWidget(self.tbl_availability)

        btn_done = QPushButton("Mark selected booking completed")
        btn_done.clicked.connect(self._complete_selected)
        layout.addWidget(btn_done)

    def _find_employee(self):
        user = self.session.user or {}
        for emp in api_client.get_employees():
            if emp.get("userId") == user.get("id"):
                return emp
        return None

    def reload(self):
        if not self.session.token:
            return
        try:
            self.employee = self._find_employee()
            if not self.employee:
                self.lbl_title.setText("No employee record is linked to this account")
                self.tbl_bookings.set_records([])
                self.tbl_availability.set_records([])
                return
            self.lbl_title.setText(f"Schedule of {self.employee['name']}")
            emp_id = self.employee["id"]
            self.tbl_bookings.set_records(api_client.get_bookings(self.session.token, employeeId=emp_id))
            self.tbl_availability.set_records(api_client.get_availability(emp_id))
        except RuntimeError as e:
            QMessageBox.warning(self, "Error", str(e))

    def _complete_selected(self):
        booking = self.tbl_bookings.selected_record()
        if not booking:
            return
        try:
            api_client.update_booking(self.session.token, booking["id"], {"status": "completed"})
        except RuntimeError as e:
            QMessageBox.warning(self, "Error", str(e))
            return
        self.reload()
