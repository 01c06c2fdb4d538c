# salon_frontend/views/main_window.py
from PySide6.QtWidgets import QMainWindow, QWidget, QLabel, QVBoxLayout, QStackedWidget, QFrame, QHBoxLayout
from PySide6.QtCore import Qt

from salon_frontend.services.access_guard import CHANGE_PASSWORD_PATH, LOGIN_PATH, home_for
from salon_frontend.services.session_service import AuthSession
from salon_frontend.views.pages.login_page import LoginPage
from salon_frontend.views.pages.change_password_page import ChangePasswordPage
from salon_frontend.views.pages.dashboard_page import DashboardPage
from salon_frontend.views.pages.employee_home import EmployeeHome
from salon_frontend.views.pages.client_home import ClientHome
from salon_frontend.views.widgets.protected_page import ProtectedPage


class MainWindow(QMainWindow):
    """Single window; every route is a page in one stack."""

    def __init__(self, session: AuthSession):
        super().__init__()
        self.session = session
        self.setWindowTitle("Salon")
        self.resize(1180, 760)

        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        central_layout = QVBoxLayout(central_widget)
        central_layout.setContentsMargins(0, 0, 0, 0)

        header = QFrame(objectName="Header")
        header.setFixedHeight(72)
        hlayout = QHBoxLayout(header)
        hlayout.addWidget(QLabel("Salon", objectName="Title"), 0, Qt.AlignCenter)
        header.setStyleSheet("QLabel#Title { font-size: 28px; font-weight: bold; }")

        self.stack = QStackedWidget(objectName="ContentStack")
        central_layout.addWidget(header)
        central_layout.addWidget(self.stack)

        # ==== routes ====
        self.page_login = LoginPage(session)
        change_password = ChangePasswordPage(session)
        dashboard = DashboardPage(session)
        employee = EmployeeHome(session)
        client = ClientHome(session)

        self.routes = {
            LOGIN_PATH: self.page_login,
            "/dashboard": ProtectedPage(session, dashboard, ["owner"], "/dashboard"),
            "/employee": ProtectedPage(session, employee, ["employee"], "/employee"),
            "/client": ProtectedPage(session, client, ["client"], "/client"),
            CHANGE_PASSWORD_PATH: ProtectedPage(
                session, change_password, ["owner", "employee", "client"], CHANGE_PASSWORD_PATH,
            ),
        }
        for page in self.routes.values():
            self.stack.addWidget(page)
            if isinstance(page, ProtectedPage):
                page.navigate_requested.connect(self.navigate)

        # ==== events ====
        self.page_login.login_success.connect(lambda user: self.navigate(home_for(user.get("role"))))
        change_password.password_changed.connect(lambda user: self.navigate(home_for(user.get("role"))))
        for page in (dashboard, employee, client):
            page.logout_requested.connect(self._logout)

        self.navigate(LOGIN_PATH)

    def navigate(self, path: str):
        page = self.routes.get(path) or self.page_login
        if self.stack.currentWidget() is not page:
            self.stack.setCurrentWidget(page)

    def _logout(self):
        self.session.logout()
        self.navigate(LOGIN_PATH)
        self.statusBar().showMessage("Signed out", 3000)
