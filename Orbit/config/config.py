import os
from pathlib import Path

from dotenv import load_dotenv

# Load project-level .env automatically so runtime behavior matches configured values.
_repo_root = Path(__file__).resolve().parents[2]
load_dotenv(_repo_root / ".env", override=False)


# App directory
# Comma separated, scanned in order; first occurrence of a name wins.
applications_dirs = os.getenv("ORBIT_APPLICATIONS_DIRS", "/Applications")
app_bundle_suffix = os.getenv("ORBIT_APP_BUNDLE_SUFFIX", ".app")


# Launch bridge
# Argument vector prefix; the application name is appended as one argument.
# Linux desktops can use e.g. "gtk-launch" with ORBIT_APP_BUNDLE_SUFFIX=".desktop".
launch_command = os.getenv("ORBIT_LAUNCH_COMMAND", "open -a")
launch_timeout_s = float(os.getenv("ORBIT_LAUNCH_TIMEOUT_S", "15"))
security_enforce_known_apps = os.getenv("ORBIT_SECURITY_ENFORCE_KNOWN_APPS", "0")


# Voice capture (SpeechRecognition, Google web recognizer)
speech_language = os.getenv("ORBIT_SPEECH_LANGUAGE", "en-US")
speech_energy_threshold = int(os.getenv("ORBIT_SPEECH_ENERGY_THRESHOLD", "3000"))
speech_dynamic_energy_threshold = os.getenv("ORBIT_SPEECH_DYNAMIC_ENERGY", "1")
speech_pause_threshold = float(os.getenv("ORBIT_SPEECH_PAUSE_THRESHOLD", "0.8"))
speech_adjust_noise = os.getenv("ORBIT_SPEECH_ADJUST_NOISE", "0")
speech_phrase_time_limit = int(os.getenv("ORBIT_SPEECH_PHRASE_TIME_LIMIT", "8"))
_speech_listen_timeout_env = os.getenv("ORBIT_SPEECH_LISTEN_TIMEOUT_S", "").strip()
speech_listen_timeout = float(_speech_listen_timeout_env) if _speech_listen_timeout_env else 6.0
_speech_input_device_env = os.getenv("ORBIT_SPEECH_INPUT_DEVICE_INDEX", "").strip()
speech_input_device_index = int(_speech_input_device_env) if _speech_input_device_env else None


# Window
window_title = os.getenv("ORBIT_WINDOW_TITLE", "Orbit")
window_width = int(os.getenv("ORBIT_WINDOW_WIDTH", "1200"))
window_height = int(os.getenv("ORBIT_WINDOW_HEIGHT", "800"))
window_min_width = int(os.getenv("ORBIT_WINDOW_MIN_WIDTH", "900"))
window_min_height = int(os.getenv("ORBIT_WINDOW_MIN_HEIGHT", "600"))
window_frameless = os.getenv("ORBIT_WINDOW_FRAMELESS", "1")


# Runtime / ops
runtime_log_enabled = os.getenv("ORBIT_RUNTIME_LOG_ENABLED", "1")
runtime_log_path = os.getenv("ORBIT_RUNTIME_LOG_PATH", "Orbit/data/runtime_events.jsonl")
runtime_precheck_url = os.getenv("ORBIT_RUNTIME_PRECHECK_URL", "https://www.google.com/generate_204")
latency_trace = os.getenv("ORBIT_LATENCY_TRACE", "1")
