import sys
import threading
from typing import Any, cast

from PyQt5 import QtCore
from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QApplication, QMainWindow

from Orbit import OrbitAssistant
from Orbit.config import config
from Orbit.features.gui import Ui_MainWindow
from Orbit.features.window import get_window_handle
from Orbit.runtime import startup_precheck

obj = OrbitAssistant()


def _as_bool(value):
    return str(value or "").strip().lower() in ("1", "true", "yes", "on")


class Main(QMainWindow):
    # Worker threads report through these; slots run on the GUI thread.
    messageAdded = QtCore.pyqtSignal(object)
    appsLoaded = QtCore.pyqtSignal(object)
    listeningChanged = QtCore.pyqtSignal(bool)
    statusReady = QtCore.pyqtSignal(str)

    def __init__(self):
        super().__init__()
        if _as_bool(getattr(config, "window_frameless", "1")):
            self.setWindowFlags(self.windowFlags() | Qt.FramelessWindowHint)
        self.resize(int(config.window_width), int(config.window_height))
        self.setMinimumSize(int(config.window_min_width), int(config.window_min_height))

        self.ui = Ui_MainWindow()
        self.ui.setupUi(self)
        self.setWindowTitle(str(getattr(config, "window_title", "Orbit")))
        self.ui.titleLabel.setText(str(getattr(config, "window_title", "Orbit")))

        self._handle = get_window_handle()
        self._handle.attach(self, on_close=self._quit)

        message_signal = cast(Any, self.messageAdded)
        message_signal.connect(self.ui.appendMessage)
        apps_signal = cast(Any, self.appsLoaded)
        apps_signal.connect(self._show_apps)
        listening_signal = cast(Any, self.listeningChanged)
        listening_signal.connect(self.ui.setListening)
        status_signal = cast(Any, self.statusReady)
        status_signal.connect(self._set_status_chip)
        obj.set_message_callback(message_signal.emit)
        obj.set_apps_callback(apps_signal.emit)

        self.ui.closeDot.clicked.connect(lambda: self._handle.control("close"))  # type: ignore[attr-defined]
        self.ui.minimizeDot.clicked.connect(lambda: self._handle.control("minimize"))  # type: ignore[attr-defined]
        self.ui.maximizeDot.clicked.connect(lambda: self._handle.control("maximize"))  # type: ignore[attr-defined]
        self.ui.appList.itemClicked.connect(self._app_clicked)  # type: ignore[attr-defined]
        self.ui.sendButton.clicked.connect(self.submitInput)  # type: ignore[attr-defined]
        self.ui.inputLine.returnPressed.connect(self.submitInput)  # type: ignore[attr-defined]
        self.ui.micButton.clicked.connect(self.startListening)  # type: ignore[attr-defined]

        self._drag_origin = None

    def showEvent(self, event):
        super().showEvent(event)
        if self._handle.activate():
            obj.load_apps()
            threading.Thread(target=self._run_background_health_checks, daemon=True).start()

    def closeEvent(self, event):
        self._handle.destroy()
        super().closeEvent(event)

    def _show_apps(self, apps):
        self.ui.setApps(apps)
        self._set_status_chip(f"{len(apps)} APPS")

    def _app_clicked(self, item):
        name = item.data(Qt.UserRole)
        if name:
            obj.launch_app_name(name)

    def submitInput(self):
        text = self.ui.inputLine.text()
        if not text.strip():
            return
        obj.handle_text(text)
        self.ui.inputLine.clear()

    def startListening(self):
        listening_signal = cast(Any, self.listeningChanged)
        started = obj.start_listening(on_end=lambda: listening_signal.emit(False))
        if started:
            self.ui.setListening(True)

    def _set_status_chip(self, text):
        try:
            self.ui.statusChip.setText(str(text))
        except RuntimeError:
            pass

    def _run_background_health_checks(self):
        status_signal = cast(Any, self.statusReady)
        try:
            chk = startup_precheck(assistant=obj)
            for w in chk.get("warnings", []):
                print(f"Precheck warning: {w}")
            if not chk.get("mic"):
                status_signal.emit("MIC UNAVAILABLE")
            elif not chk.get("internet"):
                status_signal.emit("VOICE OFFLINE")
        except Exception as e:
            print(f"Startup health checks failed: {e}")

    def _quit(self):
        self.close()
        QApplication.instance().quit()

    # Frameless window: drag anywhere on the background to move it.
    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._drag_origin = event.globalPos() - self.frameGeometry().topLeft()
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._drag_origin is not None and event.buttons() & Qt.LeftButton:
            self.move(event.globalPos() - self._drag_origin)
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        self._drag_origin = None
        super().mouseReleaseEvent(event)


if __name__ == "__main__":
    app = QApplication(sys.argv)
    orbit = Main()
    orbit.show()
    sys.exit(app.exec_())
