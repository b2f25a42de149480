import unittest
from unittest import mock

from Orbit.config import config
from Orbit.features import window as window_mod
from Orbit.features.window import WindowHandle, get_window_handle


class _FakeWindow:
    def __init__(self):
        self.maximized = False
        self.calls = []

    def showMinimized(self):
        self.calls.append("minimized")

    def isMaximized(self):
        return self.maximized

    def showMaximized(self):
        self.maximized = True
        self.calls.append("maximized")

    def showNormal(self):
        self.maximized = False
        self.calls.append("normal")

    def close(self):
        self.calls.append("closed")


class WindowHandleTests(unittest.TestCase):
    def setUp(self):
        patcher = mock.patch.object(config, "runtime_log_enabled", "0")
        patcher.start()
        self.addCleanup(patcher.stop)
        self.handle = WindowHandle()
        self.window = _FakeWindow()

    def test_lifecycle(self):
        self.assertEqual(self.handle.state, window_mod.IDLE)
        self.handle.attach(self.window)
        self.assertEqual(self.handle.state, window_mod.CREATED)
        self.assertTrue(self.handle.activate())
        self.assertFalse(self.handle.activate())
        self.assertEqual(self.handle.state, window_mod.ACTIVE)
        self.handle.destroy()
        self.assertEqual(self.handle.state, window_mod.DESTROYED)
        self.assertIsNone(self.handle.window())

    def test_single_live_window(self):
        self.handle.attach(self.window)
        with self.assertRaises(RuntimeError):
            self.handle.attach(_FakeWindow())

    def test_control_without_window_is_refused(self):
        self.assertFalse(self.handle.control("minimize"))
        self.handle.attach(self.window)
        self.handle.destroy()
        self.assertFalse(self.handle.control("minimize"))
        self.assertEqual(self.window.calls, [])

    def test_minimize_and_maximize_toggle(self):
        self.handle.attach(self.window)
        self.assertTrue(self.handle.control("minimize"))
        self.assertTrue(self.handle.control("maximize"))
        self.assertTrue(self.handle.control("maximize"))
        self.assertEqual(self.window.calls, ["minimized", "maximized", "normal"])

    def test_close_uses_quit_callback(self):
        quits = []
        self.handle.attach(self.window, on_close=lambda: quits.append(True))
        self.assertTrue(self.handle.control("close"))
        self.assertEqual(quits, [True])
        self.assertEqual(self.window.calls, [])

    def test_close_without_callback_closes_window(self):
        self.handle.attach(self.window)
        self.assertTrue(self.handle.control("close"))
        self.assertEqual(self.window.calls, ["closed"])

    def test_unknown_action(self):
        self.handle.attach(self.window)
        self.assertFalse(self.handle.control("fullscreen"))
        self.assertEqual(self.window.calls, [])

    def test_process_wide_handle(self):
        self.assertIs(get_window_handle(), get_window_handle())


if __name__ == "__main__":
    unittest.main()
