import threading

from Orbit.runtime import log_event


IDLE = "idle"
CREATED = "created"
ACTIVE = "active"
DESTROYED = "destroyed"

WINDOW_ACTIONS = ("minimize", "maximize", "close")


class WindowHandle:
    """
    Owns the single launcher window for the life of the process.
    The rest of the app sends control actions; only this handle touches the window.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._window = None
        self._on_close = None
        self.state = IDLE

    def attach(self, window, on_close=None):
        with self._lock:
            if self.state in (CREATED, ACTIVE):
                raise RuntimeError("A launcher window is already attached")
            self._window = window
            self._on_close = on_close
            self.state = CREATED
        return window

    def activate(self):
        with self._lock:
            if self.state != CREATED:
                return False
            self.state = ACTIVE
        return True

    def destroy(self):
        with self._lock:
            self._window = None
            self._on_close = None
            self.state = DESTROYED

    def window(self):
        return self._window

    def control(self, action):
        window = self._window
        if window is None or self.state == DESTROYED:
            print("Window reference is invalid")
            log_event("window_control", action=str(action), ok=False, reason="no_window")
            return False
        if action not in WINDOW_ACTIONS:
            print(f"Unknown window control action: {action}")
            log_event("window_control", action=str(action), ok=False, reason="unknown_action")
            return False

        try:
            if action == "minimize":
                window.showMinimized()
            elif action == "maximize":
                if window.isMaximized():
                    window.showNormal()
                else:
                    window.showMaximized()
            else:
                on_close = self._on_close
                if on_close is not None:
                    on_close()
                else:
                    window.close()
        except Exception as e:
            print(f"Error handling window control: {e}")
            log_event("window_control", action=action, ok=False, reason="error")
            return False
        log_event("window_control", action=action, ok=True)
        return True


_handle = WindowHandle()


def get_window_handle():
    return _handle
