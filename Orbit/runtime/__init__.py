from .structured_log import set_turn_id, get_turn_id, latency_fields, log_event
from .errors import DirectoryUnavailable, LaunchFailed, OrbitError, Unsupported, humanize
from .precheck import startup_precheck
