"""Replay a recorded stream of timing deltas against a full snapshot.

Usage:
    python examples/replay_deltas.py snapshot.json deltas.json

``snapshot.json`` holds a full ``{"lines": {nr: {...}}}`` timing message and
``deltas.json`` a list of ``{"lap": int | null, "update": {"lines": {...}}}``
messages in arrival order. The snapshot is not advanced between messages.
"""

import json
import sys

from livetiming import reconcile_timing_lines, validate_timing_lines
from livetiming.formatters import format_gap_ms, format_laptime_ms


def main(snapshot_path: str, deltas_path: str) -> None:
    with open(snapshot_path, encoding="utf-8") as fh:
        drivers = validate_timing_lines(json.load(fh))
    with open(deltas_path, encoding="utf-8") as fh:
        messages = json.load(fh)

    print(f"=== {len(drivers)} drivers, {len(messages)} messages ===")
    for message in messages:
        lap = message.get("lap")
        for record in reconcile_timing_lines(lap, drivers, message.get("update")):
            print(
                f"  Lap {lap or '-'} #{record.nr}: "
                f"last {format_laptime_ms(record.laptime)}  "
                f"leader {format_gap_ms(record.leader_gap)}  "
                f"ahead {format_gap_ms(record.gap)}"
            )


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)
    main(sys.argv[1], sys.argv[2])
