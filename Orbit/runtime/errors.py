_MAP = {
    "directory_unavailable": "Could not load applications.",
    "launch_failed": "The application could not be launched.",
    "launch_target_rejected": "That application name is not allowed.",
    "voice_unsupported": "Speech recognition is not supported on this system.",
    "voice_request_failed": "The speech service could not be reached.",
}


class OrbitError(Exception):
    code = "error"

    def __init__(self, message=""):
        super().__init__(message)
        self.message = str(message or "")


class DirectoryUnavailable(OrbitError):
    """Enumerating the applications directory failed."""

    code = "directory_unavailable"


class LaunchFailed(OrbitError):
    """The host could not open the application; message is the host's text."""

    code = "launch_failed"


class Unsupported(OrbitError):
    """Voice capture is not available on this platform."""

    code = "voice_unsupported"


def humanize(error_code, details=""):
    code = str(error_code or "").strip()
    msg = _MAP.get(code, "An unexpected error occurred.")
    if details:
        return f"{msg} ({details})"
    return msg
