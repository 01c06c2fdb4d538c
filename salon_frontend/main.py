# salon_frontend/main.py
import logging
import os
import sys

from dotenv import load_dotenv
from PySide6.QtWidgets import QApplication

from salon_frontend.services.session_service import AuthSession
from salon_frontend.views.main_window import MainWindow

load_dotenv()


def main():
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    session = AuthSession()
    w = MainWindow(session)
    # a token can be handed over from a previous run through the environment
    session.load(os.getenv("SALON_TOKEN"))
    w.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
