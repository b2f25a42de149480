import json
import os

from Orbit.config import config


def main():
    path = os.path.abspath(str(getattr(config, "runtime_log_path", "Orbit/data/runtime_events.jsonl")))
    if not os.path.exists(path):
        print("No event log found.")
        return
    with open(path, "r", encoding="utf-8") as f:
        rows = [json.loads(x) for x in f if x.strip()]
    print(f"Runtime events: {len(rows)}")
    for row in rows[-40:]:
        extra = {k: v for k, v in row.items() if k not in ("ts", "turn_id", "event")}
        print(f"{row.get('ts')} [{row.get('turn_id')}] {row.get('event')}: {str(extra)[:180]}")


if __name__ == "__main__":
    main()
