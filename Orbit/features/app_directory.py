import os
import threading
from concurrent.futures import Future

from Orbit.config import config
from Orbit.runtime import DirectoryUnavailable, log_event


def _csv(value):
    return [x.strip() for x in str(value or "").split(",") if x.strip()]


def _applications_dirs():
    return _csv(getattr(config, "applications_dirs", "/Applications"))


def scan_applications(directories=None, suffix=None):
    """
    Enumerate installed applications (host side).
    :param directories: folders to list, in order; defaults to ORBIT_APPLICATIONS_DIRS
    :param suffix: bundle suffix marking an application entry, e.g. ".app"
    :return: application names in listing order, suffix stripped, no duplicates
    """
    if directories is None:
        directories = _applications_dirs()
    if suffix is None:
        suffix = getattr(config, "app_bundle_suffix", ".app")

    names = []
    seen = set()
    for folder in directories:
        try:
            entries = sorted(os.listdir(folder))
        except OSError as e:
            raise DirectoryUnavailable(f"{folder}: {e.strerror or e}") from e
        for entry in entries:
            if not entry.endswith(suffix) or len(entry) == len(suffix):
                continue
            name = entry[: -len(suffix)] if suffix else entry
            if name in seen:
                continue
            seen.add(name)
            names.append(name)
    return names


class AppDirectory:
    """Session-cached snapshot of the host's applications (presentation side)."""

    def __init__(self, bridge):
        self._bridge = bridge
        self._lock = threading.Lock()
        self._snapshot = None
        self._pending = None

    def load(self):
        """
        Fetch the snapshot once. Later calls reuse the in-flight request or
        the cached result; there is no refresh.
        :return: Future resolving to the tuple of names
        """
        with self._lock:
            if self._snapshot is not None:
                done = Future()
                done.set_result(self._snapshot)
                return done
            if self._pending is not None:
                return self._pending
            out = Future()
            self._pending = out

        request = self._bridge.list_applications()
        request.add_done_callback(lambda fut: self._store(fut, out))
        return out

    def _store(self, request, out):
        error = request.exception()
        with self._lock:
            self._pending = None
            if error is None:
                self._snapshot = tuple(request.result())
        if error is not None:
            log_event("apps_unavailable", error=str(error))
            out.set_exception(error)
            return
        log_event("apps_loaded", count=len(self._snapshot))
        out.set_result(self._snapshot)

    def loaded(self):
        return self._snapshot is not None

    def apps(self):
        return self._snapshot or ()
