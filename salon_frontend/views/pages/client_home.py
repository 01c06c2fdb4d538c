# salon_frontend/views/pages/client_home.py
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QMessageBox, QComboBox, QDateEdit
)
from PySide6.QtCore import QDate, Signal

from salon_frontend.services import api_client
from salon_frontend.services.session_service import AuthSession
from salon_frontend.views.widgets.records_table import RecordsTable


class ClientHome(QWidget):
    """A client's bookings plus a small booking form: service, then employee, then a free slot."""
    logout_requested = Signal()

    def __init__(self, session: AuthSession):
        super().__init__()
        self.session = session

        layout = QVBoxLayout(self)
        top = QHBoxLayout()
        title = QLabel("My bookings")
        title.setStyleSheet("font-size:22px; font-weight:800;")
        btn_logout = QPushButton("Log out")
        btn_logout.clicked.connect(self.logout_requested.emit)
        top.addWidget(title)
        top.addStretch()
        top.addWidget(btn_logout)
        layout.addLayout(top)

        self.tbl_bookings = RecordsTable([
            ("Date", "bookingDate"), ("Time", "bookingTime"), ("Status", "status"), ("Notes", "notes"),
        ])
        layout.addWidget(self.tbl_bookings)
        btn_cancel = QPushButton("Cancel selected booking")
        btn_cancel.clicked.connect(self._cancel_selected)
        layout.addWidget(btn_cancel)

        # ---- new booking ----
        form = QHBoxLayout()
        self.cb_service = QComboBox()
        self.cb_employee = QComboBox()
        self.ed_date = QDateEdit(QDate.currentDate())
        self.ed_date.setCalendarPopup(True)
        self.ed_date.setDisplayFormat("yyyy-MM-dd")
        self.cb_time = QComboBox()
        btn_book = QPushButton("Book")
        for w in (self.cb_service, self.cb_employee, self.ed_date, self.cb_time, btn_book):
            form.addWidget(w)
        layout.addLayout(form)

        self.cb_service.currentIndexChanged.connect(self._load_employees)
        self.cb_employee.currentIndexChanged.connect(self._load_slots)
        self.ed_date.dateChanged.connect(self._load_slots)
        btn_book.clicked.connect(self._book)

    def reload(self):
        if not self.session.token:
            return
        try:
            self.tbl_bookings.set_records(api_client.get_bookings(self.session.token))
            self.cb_service.blockSignals(True)
            self.cb_service.clear()
            for svc in api_client.get_services(with_employees=True):
                self.cb_service.addItem(f"{svc['name']} ({svc['duration']} min)", svc["id"])
            self.cb_service.blockSignals(False)
            self._load_employees()
        except RuntimeError as e:
            QMessageBox.warning(self, "Error", str(e))

    def _load_employees(self):
        self.cb_employee.blockSignals(True)
        self.cb_employee.clear()
        service_id = self.cb_service.currentData()
        if service_id:
            try:
                for emp in api_client.get_employees_for_service(service_id):
                    self.cb_employee.addItem(emp["name"], emp["id"])
            except RuntimeError as e:
                QMessageBox.warning(self, "Error", str(e))
        self.cb_employee.blockSignals(False)
        self._load_slots()

    def _load_slots(self):
        self.cb_time.clear()
        service_id, employee_id = self.cb_service.currentData(), self.cb_employee.currentData()
        if not service_id or not employee_id:
            return
        day = self.ed_date.date().toString("yyyy-MM-dd")
        try:
            for slot in api_client.get_available_slots(employee_id, service_id, day):
                if slot["available"]:
                    self.cb_time.addItem(slot["time"])
        except RuntimeError as e:
            QMessageBox.warning(self, "Error", str(e))

    def _book(self):
        user = self.session.user or {}
        if not self.cb_time.currentText():
            QMessageBox.information(self, "Booking", "Pick a free time first")
            return
        name = " ".join(p for p in (user.get("firstName"), user.get("lastName")) if p) or user.get("email")
        payload = {
            "employeeId": self.cb_employee.currentData(),
            "serviceId": self.cb_service.currentData(),
            "bookingDate": self.ed_date.date().toString("yyyy-MM-dd"),
            "bookingTime": self.cb_time.currentText(),
            "clientName": name,
            "clientEmail": user.get("email"),
            "clientPhone": user.get("phone"),
        }
        try:
            api_client.create_booking(payload, token=self.session.token)
        except RuntimeError as e:
            QMessageBox.warning(self, "Error", str(e))
            return
        QMessageBox.information(self, "Booking", "Your booking was received")
        self.reload()

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
