# salon_frontend/views/pages/login_page.py
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QLineEdit, QPushButton, QFrame,
    QSpacerItem, QSizePolicy
)
from PySide6.QtCore import Qt, Signal

from salon_frontend.services.session_service import AuthSession


class LoginPage(QWidget):
    login_success = Signal(dict)

    def __init__(self, session: AuthSession):
        super().__init__()
        self.session = session

        root = QVBoxLayout(self)
        root.setContentsMargins(24, 24, 24, 24)
        root.addItem(QSpacerItem(0, 0, QSizePolicy.Minimum, QSizePolicy.Expanding))

        card = QFrame()
        card.setObjectName("Card")
        card.setMinimumWidth(420)
        card.setMaximumWidth(520)
        v = QVBoxLayout(card)
        v.setContentsMargins(28, 28, 28, 28)
        v.setSpacing(12)

        card.setStyleSheet("""
            QFrame#Card { background:#ffffff; border:1px solid #e5e7eb; border-radius:16px; }
            QLabel#Title { font-size: 28px; font-weight: 900; color:#111827; }
            QLineEdit { padding:12px; font-size:15px; border:1px solid #d1d5db; border-radius:10px; }
            QPushButton#Primary { padding:12px; border-radius:12px; font-weight:800; background:#db2777; color:#fff; }
            QLabel#Msg { color:#dc2626; }
        """)

        v.addWidget(QLabel("Sign in", objectName="Title", alignment=Qt.AlignCenter))

        self.ed_email = QLineEdit(placeholderText="Email")
        self.ed_pass = QLineEdit(placeholderText="Password"); self.ed_pass.setEchoMode(QLineEdit.Password)
        v.addWidget(self.ed_email)
        v.addWidget(self.ed_pass)

        self.lbl_msg = QLabel("", objectName="Msg", alignment=Qt.AlignCenter)
        v.addWidget(self.lbl_msg)

        self.btn_login = QPushButton("Sign in", objectName="Primary")
        v.addWidget(self.btn_login)

        root.addWidget(card, 0, Qt.AlignCenter)
        root.addItem(QSpacerItem(0, 0, QSizePolicy.Minimum, QSizePolicy.Expanding))

        self.btn_login.clicked.connect(self._do_login)
        self.ed_pass.returnPressed.connect(self._do_login)

    def _do_login(self):
        email, password = self.ed_email.text().strip(), self.ed_pass.text()
        if not email or not password:
            self.lbl_msg.setText("Email and password are required")
            return
        self.btn_login.setEnabled(False)
        try:
            user = self.session.login(email, password)
        except RuntimeError as e:
            self.lbl_msg.setText(str(e))
            return
        finally:
            self.btn_login.setEnabled(True)
        self.lbl_msg.setText("")
        self.ed_pass.clear()
        self.login_success.emit(user)
