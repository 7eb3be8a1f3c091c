"""Demo script for life-timeline."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from life_timeline.adapters import csv_adapter, json_adapter

EXAMPLES_DIR = Path(__file__).resolve().parent


def main() -> None:
    events = csv_adapter.parse(str(EXAMPLES_DIR / "sample_events.csv"))
    for event in events:
        print(f"{event.date} [{event.track.value}] {event.title}: {event.text}")

    out_path = EXAMPLES_DIR / "sample_events.json"
    json_adapter.dump(events, str(out_path))
    print("Saved JSON records to", out_path)


if __name__ == "__main__":
    main()
