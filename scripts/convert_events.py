"""Convert a life event dataset between CSV and JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from life_timeline.adapters import csv_adapter, json_adapter


def _adapter_for(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter
    if suffix == ".json":
        return json_adapter
    raise ValueError(f"Unsupported format for {path}, expected .csv or .json")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Convert life events between CSV and JSON")
    parser.add_argument("--input", required=True, help="Path to CSV/JSON events file")
    parser.add_argument("--output", required=True, help="Destination .csv or .json path")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(args.input)
    output_path = Path(args.output)
    reader = _adapter_for(input_path)
    writer = _adapter_for(output_path)

    events = reader.parse(str(input_path))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    writer.dump(events, str(output_path))
    print(f"Converted {len(events)} events from {input_path} to {output_path}")


if __name__ == "__main__":
    main()
