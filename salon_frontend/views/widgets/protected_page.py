# salon_frontend/views/widgets/protected_page.py
from typing import Iterable

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QStackedWidget
from PySide6.QtCore import Qt, Signal

from salon_frontend.services.access_guard import LOADING, REDIRECT, LOGIN_PATH, evaluate_access
from salon_frontend.services.session_service import AuthSession


class ProtectedPage(QWidget):
    """Shows ``content`` only when the session passes the access guard; otherwise asks to navigate."""
    navigate_requested = Signal(str)

    def __init__(
        self,
        session: AuthSession,
        content: QWidget,
        allowed_roles: Iterable[str],
        path: str,
        redirect_to: str = LOGIN_PATH,
        enforce_password_reset: bool = True,
    ):
        super().__init__()
        self.session = session
        self.content = content
        self.allowed_roles = tuple(allowed_roles)
        self.path = path
        self.redirect_to = redirect_to
        self.enforce_password_reset = enforce_password_reset

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.stack = QStackedWidget()
        self.placeholder = QLabel("Loading…", alignment=Qt.AlignCenter)
        self.stack.addWidget(self.placeholder)
        self.stack.addWidget(content)
        layout.addWidget(self.stack)

        # hidden pages re-check when shown
        self._unsubscribe = session.subscribe(lambda _s: self.refresh() if self.isVisible() else None)

    def refresh(self):
        decision = evaluate_access(
            self.session, self.allowed_roles, self.path,
            redirect_to=self.redirect_to,
            enforce_password_reset=self.enforce_password_reset,
        )
        if decision.action == LOADING:
            self.stack.setCurrentWidget(self.placeholder)
        elif decision.action == REDIRECT:
            self.stack.setCurrentWidget(self.placeholder)
            self.navigate_requested.emit(decision.target)
        else:
            if hasattr(self.content, "reload"):
                self.content.reload()
            self.stack.setCurrentWidget(self.content)

    def showEvent(self, event):
        self.refresh()
        super().showEvent(event)
