import shlex
import subprocess
import threading
import time
from concurrent.futures import Future

from Orbit.config import config
from Orbit.runtime import DirectoryUnavailable, LaunchFailed, humanize, latency_fields, log_event
from Orbit.security.access_control import validate_launch_target
from Orbit.features.app_directory import scan_applications


def _as_bool(value):
    return str(value or "").strip().lower() in ("1", "true", "yes", "on")


def _launch_argv(app_name, command=None):
    prefix = command if command is not None else getattr(config, "launch_command", "open -a")
    if isinstance(prefix, str):
        prefix = shlex.split(prefix)
    return list(prefix) + [app_name]


def _default_runner(argv, timeout):
    return subprocess.run(argv, capture_output=True, text=True, timeout=timeout, shell=False)


def _error_text(proc, argv):
    err = (proc.stderr or proc.stdout or "").strip()
    if err:
        return err
    return f"Command failed: {' '.join(argv)} (exit {proc.returncode})"


class LaunchBridge:
    """
    Host-side operations exposed to the window: list and launch-by-name.
    Both run on a worker thread and report through a Future (and an
    optional callback); the caller never blocks.
    """

    def __init__(self, runner=None, scanner=None, command=None, timeout_s=None):
        self._runner = runner or _default_runner
        self._scanner = scanner or scan_applications
        self._command = command
        self._timeout_s = timeout_s
        self._last_listing = None

    def _spawn(self, target, *args):
        threading.Thread(target=target, args=args, daemon=True).start()

    def list_applications(self, callback=None):
        out = Future()
        self._spawn(self._list_worker, out, callback)
        return out

    def _list_worker(self, out, callback):
        try:
            names = list(self._scanner())
        except DirectoryUnavailable as e:
            out.set_exception(e)
        except Exception as e:
            # Any scanner failure still resolves the request.
            out.set_exception(DirectoryUnavailable(str(e) or humanize("directory_unavailable")))
        else:
            if _as_bool(getattr(config, "security_enforce_known_apps", "0")):
                self._last_listing = frozenset(names)
            out.set_result(names)
        if callback:
            try:
                callback(out)
            except Exception as e:
                print(f"List applications callback failed: {e}")

    def launch(self, app_name, callback=None):
        """
        Ask the host to open an application by its exact name.
        :param app_name: Application Name as listed; passed as one argv entry
        :param callback: called as callback(app_name, response) when done
        :return: Future resolving to {"success": True} or {"success": False, "error": str}
        """
        out = Future()
        log_event("launch_request", app=str(app_name))
        self._spawn(self._launch_worker, app_name, out, callback)
        return out

    def _launch_worker(self, app_name, out, callback):
        started = time.perf_counter()
        try:
            self._run_launch(app_name)
            response = {"success": True}
        except LaunchFailed as e:
            response = {"success": False, "error": e.message or humanize(e.code)}
        except Exception as e:
            # Bad launch_command quoting, unencodable names and the like.
            response = {"success": False, "error": str(e) or humanize("launch_failed")}
        log_event(
            "launch_result",
            app=str(app_name),
            success=response["success"],
            error=response.get("error", ""),
            **latency_fields(started),
        )
        out.set_result(response)
        if callback:
            try:
                callback(app_name, response)
            except Exception as e:
                print(f"Launch callback failed: {e}")

    def _run_launch(self, app_name):
        ok, reason = validate_launch_target(app_name, known_apps=self._last_listing)
        if not ok:
            raise LaunchFailed(humanize("launch_target_rejected", reason))

        argv = _launch_argv(app_name, self._command)
        timeout = self._timeout_s
        if timeout is None:
            timeout = float(getattr(config, "launch_timeout_s", 15))
        try:
            proc = self._runner(argv, timeout)
        except FileNotFoundError as e:
            raise LaunchFailed(f"Launcher not found: {argv[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise LaunchFailed(f"Timed out opening {app_name}") from e
        except OSError as e:
            raise LaunchFailed(str(e) or humanize("launch_failed")) from e
        if proc.returncode != 0:
            raise LaunchFailed(_error_text(proc, argv))
