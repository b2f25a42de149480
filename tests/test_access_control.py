import unittest
from unittest import mock

from Orbit.config import config
from Orbit.security.access_control import validate_launch_target


class AccessControlTests(unittest.TestCase):
    def setUp(self):
        patcher = mock.patch.object(config, "security_enforce_known_apps", "0")
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_plain_names_allowed(self):
        for name in ("Safari", "Visual Studio Code", "Ünïcode App", "NonexistentApp"):
            ok, reason = validate_launch_target(name)
            self.assertTrue(ok, name)
            self.assertEqual(reason, "")

    def test_empty_name_rejected(self):
        self.assertEqual(validate_launch_target(""), (False, "launch_target_empty"))
        self.assertEqual(validate_launch_target("   "), (False, "launch_target_empty"))
        self.assertEqual(validate_launch_target(None), (False, "launch_target_not_text"))

    def test_paths_rejected(self):
        for name in ("../Safari", "/bin/sh", "C:\\Windows\\cmd"):
            ok, reason = validate_launch_target(name)
            self.assertFalse(ok)
            self.assertEqual(reason, "launch_target_has_path")

    def test_control_characters_rejected(self):
        ok, reason = validate_launch_target("Mail\nrm")
        self.assertFalse(ok)
        self.assertEqual(reason, "launch_target_has_control_chars")

    def test_option_like_names_rejected(self):
        ok, reason = validate_launch_target("-n")
        self.assertFalse(ok)
        self.assertEqual(reason, "launch_target_looks_like_option")

    def test_known_app_enforcement(self):
        with mock.patch.object(config, "security_enforce_known_apps", "1"):
            self.assertEqual(
                validate_launch_target("Safari", known_apps=None),
                (False, "launch_target_not_enumerated"),
            )
            self.assertEqual(validate_launch_target("Safari", known_apps={"Safari"}), (True, ""))
            self.assertEqual(
                validate_launch_target("Mail", known_apps=["Safari"]),
                (False, "launch_target_not_enumerated"),
            )


if __name__ == "__main__":
    unittest.main()
