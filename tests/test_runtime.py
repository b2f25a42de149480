import json
import os
import tempfile
import time
import unittest
from unittest import mock

import requests

from Orbit.config import config
from Orbit.runtime import (
    DirectoryUnavailable,
    LaunchFailed,
    OrbitError,
    Unsupported,
    get_turn_id,
    humanize,
    latency_fields,
    log_event,
    set_turn_id,
    startup_precheck,
)


class StructuredLogTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = os.path.join(self._tmp.name, "logs", "events.jsonl")

    def test_writes_json_line_with_turn_id(self):
        turn = set_turn_id("turn-1")
        self.assertEqual(get_turn_id(), "turn-1")
        with mock.patch.object(config, "runtime_log_path", self.path), mock.patch.object(
            config, "runtime_log_enabled", "1"
        ):
            self.assertTrue(log_event("launch_result", app="Mail", success=True))
        with open(self.path, "r", encoding="utf-8") as f:
            rows = [json.loads(line) for line in f if line.strip()]
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0]["event"], "launch_result")
        self.assertEqual(rows[0]["turn_id"], turn)
        self.assertEqual(rows[0]["app"], "Mail")
        self.assertTrue(rows[0]["success"])

    def test_disabled_log_writes_nothing(self):
        with mock.patch.object(config, "runtime_log_path", self.path), mock.patch.object(
            config, "runtime_log_enabled", "0"
        ):
            self.assertFalse(log_event("launch_request", app="Mail"))
        self.assertFalse(os.path.exists(self.path))

    def test_latency_fields_follow_trace_flag(self):
        started = time.perf_counter()
        with mock.patch.object(config, "latency_trace", "1"):
            fields = latency_fields(started)
        self.assertEqual(set(fields), {"ms"})
        self.assertGreaterEqual(fields["ms"], 0)
        with mock.patch.object(config, "latency_trace", "0"):
            self.assertEqual(latency_fields(started), {})


class ErrorTests(unittest.TestCase):
    def test_humanize_known_and_unknown(self):
        self.assertEqual(humanize("launch_failed"), "The application could not be launched.")
        self.assertEqual(
            humanize("launch_target_rejected", "launch_target_empty"),
            "That application name is not allowed. (launch_target_empty)",
        )
        self.assertEqual(humanize("nope"), "An unexpected error occurred.")

    def test_error_types(self):
        for cls in (DirectoryUnavailable, LaunchFailed, Unsupported):
            err = cls("details")
            self.assertIsInstance(err, OrbitError)
            self.assertEqual(err.message, "details")
            self.assertEqual(str(err), "details")
        self.assertEqual(Unsupported.code, "voice_unsupported")


class _MicAssistant:
    def __init__(self, mic):
        self.mic = mic

    def mic_available(self):
        return self.mic


class PrecheckTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        for name, value in (
            ("runtime_log_enabled", "0"),
            ("applications_dirs", self._tmp.name),
        ):
            patcher = mock.patch.object(config, name, value)
            patcher.start()
            self.addCleanup(patcher.stop)

    def test_all_green(self):
        with mock.patch("Orbit.runtime.precheck.requests.get", return_value=mock.Mock(status_code=204)):
            out = startup_precheck(assistant=_MicAssistant(True))
        self.assertTrue(out["mic"])
        self.assertTrue(out["internet"])
        self.assertEqual(out["apps_dirs"], {self._tmp.name: True})
        self.assertEqual(out["warnings"], [])

    def test_warnings_collected(self):
        missing = os.path.join(self._tmp.name, "missing")
        with mock.patch.object(config, "applications_dirs", missing), mock.patch(
            "Orbit.runtime.precheck.requests.get", side_effect=requests.ConnectionError("offline")
        ):
            out = startup_precheck(assistant=_MicAssistant(False))
        codes = [w["code"] for w in out["warnings"]]
        self.assertEqual(codes, ["mic_unavailable", "apps_dir_missing", "offline_voice"])
        self.assertFalse(out["internet"])


if __name__ == "__main__":
    unittest.main()
