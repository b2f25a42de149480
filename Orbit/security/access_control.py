from Orbit.config import config


_FORBIDDEN_CHARS = ("/", "\\", "\x00")


def _as_bool(value):
    return str(value or "").strip().lower() in ("1", "true", "yes", "on")


def _has_control_chars(text):
    return any(ord(ch) < 32 or ord(ch) == 127 for ch in text)


def validate_launch_target(app_name, known_apps=None):
    """
    Gate a launch request before the host spawns anything.

    Only a bare application name is accepted: no paths, no control
    characters and nothing the launcher could read as an option.
    When ORBIT_SECURITY_ENFORCE_KNOWN_APPS is on, the name must also be
    one the host enumerated.
    return: (ok, reason)
    """
    if not isinstance(app_name, str):
        return False, "launch_target_not_text"
    name = app_name
    if not name.strip():
        return False, "launch_target_empty"
    if any(ch in name for ch in _FORBIDDEN_CHARS):
        return False, "launch_target_has_path"
    if _has_control_chars(name):
        return False, "launch_target_has_control_chars"
    if name.lstrip().startswith("-"):
        return False, "launch_target_looks_like_option"

    if _as_bool(getattr(config, "security_enforce_known_apps", "0")):
        if known_apps is None or name not in set(known_apps):
            return False, "launch_target_not_enumerated"

    return True, ""
