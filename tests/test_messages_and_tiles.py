import dataclasses
import threading
import unittest

from Orbit.features.app_tiles import app_tile, app_tiles
from Orbit.features.messages import MessageLog


class MessageLogTests(unittest.TestCase):
    def test_append_order_and_ids(self):
        log = MessageLog()
        first = log.add("user", "open mail")
        second = log.add("system", "Launching Mail...")
        self.assertEqual([m.id for m in log.all()], [first.id, second.id])
        self.assertLess(first.id, second.id)
        self.assertEqual(len(log), 2)
        self.assertLessEqual(first.timestamp, second.timestamp)

    def test_messages_are_immutable(self):
        message = MessageLog().add("user", "hi")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            message.content = "changed"

    def test_unknown_kind_rejected(self):
        with self.assertRaises(ValueError):
            MessageLog().add("assistant", "hi")

    def test_snapshot_is_detached(self):
        log = MessageLog()
        log.add("user", "a")
        snapshot = log.all()
        log.add("user", "b")
        self.assertEqual(len(snapshot), 1)

    def test_concurrent_appends_keep_unique_ids(self):
        log = MessageLog()

        def worker():
            for _ in range(50):
                log.add("system", "x")

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        ids = [m.id for m in log.all()]
        self.assertEqual(len(ids), 200)
        self.assertEqual(len(set(ids)), 200)


class AppTileTests(unittest.TestCase):
    def test_tile_fields(self):
        self.assertEqual(app_tile("safari"), {"name": "safari", "label": "safari", "initial": "S"})

    def test_empty_name(self):
        self.assertEqual(app_tile("")["initial"], "?")

    def test_tiles_follow_snapshot_order(self):
        self.assertEqual([t["name"] for t in app_tiles(("Mail", "Arc"))], ["Mail", "Arc"])
        self.assertEqual(app_tiles(None), [])


if __name__ == "__main__":
    unittest.main()
