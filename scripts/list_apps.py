import json
import sys

from Orbit.features.launch_app import LaunchBridge
from Orbit.runtime import DirectoryUnavailable


def main():
    bridge = LaunchBridge()
    try:
        apps = bridge.list_applications().result(timeout=30)
    except DirectoryUnavailable as e:
        print(json.dumps({"ok": False, "error": e.message}, ensure_ascii=False, indent=2))
        return 1
    report = {"ok": True, "count": len(apps), "apps": apps}
    if len(sys.argv) > 1:
        target = " ".join(sys.argv[1:])
        report["launch"] = {"app": target, **bridge.launch(target).result(timeout=60)}
    print(json.dumps(report, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
