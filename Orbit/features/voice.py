import threading
import time

import speech_recognition as sr

from Orbit.config import config
from Orbit.runtime import Unsupported, humanize, latency_fields, log_event


def _as_bool(value):
    return str(value or "").strip().lower() in ("1", "true", "yes", "on")


def _pyaudio_importable():
    try:
        import pyaudio  # noqa: F401

        return True
    except Exception:
        return False


def _default_microphone():
    return sr.Microphone(device_index=getattr(config, "speech_input_device_index", None))


class VoiceCapture:
    """
    Single-shot speech capture. One session at a time: start() refuses to
    begin a new capture until the current one has ended.
    """

    def __init__(self, recognizer=None, microphone_factory=None, mic_check=None):
        self._recognizer = recognizer if recognizer is not None else sr.Recognizer()
        self._microphone_factory = microphone_factory or _default_microphone
        self._mic_check = mic_check or _pyaudio_importable
        self._lock = threading.Lock()
        self._active = False
        if recognizer is None:
            self._configure_recognizer()

    def _configure_recognizer(self):
        self._recognizer.energy_threshold = int(getattr(config, "speech_energy_threshold", 3000))
        self._recognizer.dynamic_energy_threshold = _as_bool(
            getattr(config, "speech_dynamic_energy_threshold", "1")
        )
        self._recognizer.pause_threshold = float(getattr(config, "speech_pause_threshold", 0.8))

    def available(self):
        return bool(self._mic_check())

    def is_listening(self):
        return self._active

    def start(self, on_result, on_error=None, on_end=None):
        """
        Begin one capture in the background.
        :param on_result: called with the lower-cased transcript
        :param on_error: called with a readable message when the recognizer fails
        :param on_end: called once the session is over, whatever the outcome
        :return: True if a session started, False if one is already running
        """
        if not self.available():
            raise Unsupported(humanize("voice_unsupported"))
        with self._lock:
            if self._active:
                return False
            self._active = True
        log_event("voice_start")
        threading.Thread(
            target=self._capture,
            args=(on_result, on_error, on_end),
            daemon=True,
        ).start()
        return True

    def _listen(self):
        with self._microphone_factory() as source:
            if _as_bool(getattr(config, "speech_adjust_noise", "0")):
                self._recognizer.adjust_for_ambient_noise(source, duration=0.25)
            return self._recognizer.listen(
                source,
                timeout=getattr(config, "speech_listen_timeout", None),
                phrase_time_limit=int(getattr(config, "speech_phrase_time_limit", 8)) or None,
            )

    def _capture(self, on_result, on_error, on_end):
        text = ""
        error = ""
        started = time.perf_counter()
        try:
            audio = self._listen()
            text = self._recognizer.recognize_google(
                audio,
                language=getattr(config, "speech_language", "en-US"),
            )
        except (sr.WaitTimeoutError, sr.UnknownValueError):
            text = ""
        except sr.RequestError as e:
            error = humanize("voice_request_failed", str(e))
        except (OSError, AttributeError) as e:
            # AttributeError: speech_recognition reports a missing PyAudio this way.
            error = str(e) or humanize("voice_unsupported")
        except Exception as e:
            error = str(e) or humanize("voice_request_failed")
        finally:
            with self._lock:
                self._active = False

        text = str(text or "").strip().lower()
        try:
            if error:
                log_event("voice_error", error=error, **latency_fields(started))
                if on_error:
                    on_error(error)
            else:
                log_event("voice_result", heard=bool(text), **latency_fields(started))
                if text:
                    on_result(text)
        except Exception as e:
            print(f"Voice callback failed: {e}")
        finally:
            if on_end:
                on_end()
