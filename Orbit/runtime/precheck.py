import os

import requests

from Orbit.config import config
from .structured_log import log_event


def _csv(value):
    return [x.strip() for x in str(value or "").split(",") if x.strip()]


def startup_precheck(*, assistant=None):
    out = {"mic": False, "internet": False, "apps_dirs": {}, "warnings": []}
    try:
        out["mic"] = bool(assistant and assistant.mic_available())
    except Exception:
        out["mic"] = False
    if not out["mic"]:
        out["warnings"].append({"code": "mic_unavailable"})

    for folder in _csv(getattr(config, "applications_dirs", "/Applications")):
        exists = os.path.isdir(folder)
        out["apps_dirs"][folder] = exists
        if not exists:
            out["warnings"].append({"code": "apps_dir_missing", "path": folder})

    url = str(getattr(config, "runtime_precheck_url", "https://www.google.com/generate_204"))
    try:
        r = requests.get(url, timeout=3)
        out["internet"] = bool(r.status_code < 500)
    except requests.RequestException:
        out["internet"] = False
    if not out["internet"]:
        out["warnings"].append({"code": "offline_voice"})

    for w in out["warnings"]:
        log_event("precheck_warning", warning=w)
    return out
