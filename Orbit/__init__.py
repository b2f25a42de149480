from Orbit.command_utils import Launch, NoMatch, NotACommand, interpret, normalize_command
from Orbit.features.app_directory import AppDirectory
from Orbit.features.launch_app import LaunchBridge
from Orbit.features.messages import MessageLog
from Orbit.features.voice import VoiceCapture
from Orbit.runtime import DirectoryUnavailable, Unsupported, humanize, log_event, set_turn_id


def _log_error(context, error):
    print(f"{context}: {error}")


class OrbitAssistant:
    """
    Window-side coordinator: owns the app snapshot and the chat log, turns
    typed or spoken text into launch requests and reports every outcome as a
    system message.
    """

    def __init__(self, bridge=None, voice=None, on_message=None, on_apps=None):
        self._bridge = bridge or LaunchBridge()
        self._voice = voice or VoiceCapture()
        self.directory = AppDirectory(self._bridge)
        self.messages = MessageLog()
        self._on_message = on_message
        self._on_apps = on_apps

    def set_message_callback(self, cb):
        """
        Register a callback receiving every appended CommandMessage.
        This may be called from a worker thread.
        """
        self._on_message = cb

    def set_apps_callback(self, cb):
        self._on_apps = cb

    def add_message(self, kind, content):
        message = self.messages.add(kind, content)
        cb = self._on_message
        if cb:
            try:
                cb(message)
            except Exception as e:
                _log_error("Message callback failed", e)
        return message

    def apps(self):
        return self.directory.apps()

    def load_apps(self):
        """
        Fetch installed applications once for this session
        :return: Future with the snapshot tuple
        """
        future = self.directory.load()
        future.add_done_callback(self._on_apps_loaded)
        return future

    def _on_apps_loaded(self, future):
        error = future.exception()
        if error is not None:
            detail = error.message if isinstance(error, DirectoryUnavailable) else str(error)
            _log_error("Error loading apps", detail)
            self.add_message("system", f"Could not load applications: {detail}")
            return
        cb = self._on_apps
        if cb:
            try:
                cb(future.result())
            except Exception as e:
                _log_error("Apps callback failed", e)

    def launch_app_name(self, app_name):
        """
        Launch an installed app by its exact Application Name
        :param app_name: e.g. "Safari", as listed in the snapshot
        :return: Future with {"success": bool, "error"?: str}
        """
        self.add_message("system", f"Launching {app_name}...")
        return self._bridge.launch(app_name, callback=self._on_launch_response)

    def _on_launch_response(self, app_name, response):
        if not response.get("success"):
            error = response.get("error") or humanize("launch_failed")
            _log_error("Failed to launch app", error)
            self.add_message("system", f"Failed to launch {app_name}: {error}")

    def handle_text(self, text):
        """
        Handle one typed or transcribed line.
        :return: the interpreted Action, or None for blank input
        """
        if not normalize_command(text):
            return None
        set_turn_id()
        self.add_message("user", text)
        action = interpret(text, self.apps())
        log_event("command_interpreted", action=type(action).__name__)
        if isinstance(action, Launch):
            self.launch_app_name(action.app_name)
        elif isinstance(action, NoMatch):
            self.add_message("system", f'Could not find app "{action.fragment}"')
        return action

    def mic_available(self) -> bool:
        return self._voice.available()

    @property
    def listening(self):
        return self._voice.is_listening()

    def start_listening(self, on_end=None):
        """
        Start one voice capture; the transcript is handled like typed text.
        :param on_end: called when the capture session finishes
        :return: True if listening started
        """
        try:
            started = self._voice.start(
                on_result=self.handle_text,
                on_error=self._on_voice_error,
                on_end=on_end,
            )
        except Unsupported as e:
            self.add_message("system", e.message or humanize("voice_unsupported"))
            return False
        if started:
            self.add_message("system", "Listening...")
        return started

    def _on_voice_error(self, error):
        _log_error("Speech capture failed", error)
        self.add_message("system", f"Speech recognition failed: {error}")


__all__ = ["OrbitAssistant", "Launch", "NoMatch", "NotACommand"]
