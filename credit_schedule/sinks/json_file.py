"""JSON file sink for exporting schedules to files."""

import json
from pathlib import Path

from credit_schedule.models import ScheduleResult
from credit_schedule.sinks.serialization import schedule_to_dict


class JsonFileSink:
    """Output schedules to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_schedule(self, name: str, result: ScheduleResult) -> Path:
        """Write a schedule to ``<name>.json`` and return the file path."""
        file_path = self.output_dir / f"{name}.json"

        data = schedule_to_dict(result)

        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)

        self._counts[name] = len(result.periods)
        return file_path

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for name, count in self._counts.items():
            print(f"  {name}: {count} periods")
