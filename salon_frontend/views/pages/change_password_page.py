# salon_frontend/views/pages/change_password_page.py
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QLineEdit, QPushButton, QFrame
from PySide6.QtCore import Qt, Signal

from salon_frontend.services.session_service import AuthSession


class ChangePasswordPage(QWidget):
    password_changed = Signal(dict)

    def __init__(self, session: AuthSession):
        super().__init__()
        self.session = session

        root = QVBoxLayout(self)
        card = QFrame(objectName="Card")
        card.setMaximumWidth(480)
        v = QVBoxLayout(card)
        v.setSpacing(10)

        v.addWidget(QLabel("Choose a new password", alignment=Qt.AlignCenter))
        self.ed_new = QLineEdit(placeholderText="New password"); self.ed_new.setEchoMode(QLineEdit.Password)
        self.ed_confirm = QLineEdit(placeholderText="Repeat password"); self.ed_confirm.setEchoMode(QLineEdit.Password)
        v.addWidget(self.ed_new)
        v.addWidget(self.ed_confirm)

        self.lbl_msg = QLabel("", alignment=Qt.AlignCenter)
        self.lbl_msg.setStyleSheet("color:#dc2626;")
        v.addWidget(self.lbl_msg)

        btn = QPushButton("Save")
        btn.clicked.connect(self._save)
        v.addWidget(btn)

        root.addStretch()
        root.addWidget(card, 0, Qt.AlignCenter)
        root.addStretch()

    def reload(self):
        self.ed_new.clear()
        self.ed_confirm.clear()
        self.lbl_msg.setText("")

    def _save(self):
        new, confirm = self.ed_new.text(), self.ed_confirm.text()
        if len(new) < 6:
            self.lbl_msg.setText("Password must be at least 6 characters")
            return
        if new != confirm:
            self.lbl_msg.setText("Passwords do not match")
            return
        try:
            user = self.session.change_password(new)
        except RuntimeError as e:
            self.lbl_msg.setText(str(e))
            return
        self.password_changed.emit(user)
