"""Export records to text, JSON, JSONL or CSV files."""

import csv
import json
from pathlib import Path

FIELD_RECORD = "record"


def export_records(records: list[str], output_path: str) -> None:
    """Export records to a file. Format is auto-detected from extension.

    Args:
        records: Records to write, in the order given.
        output_path: Path to output file (.txt, .json, .jsonl, or .csv).

    Raises:
        ValueError: If the file extension is not .txt, .json, .jsonl, or .csv.
    """
    path = Path(output_path)
    ext = path.suffix.lower()

    if ext == ".txt":
        _export_txt(records, path)
    elif ext == ".json":
        _export_json(records, path)
    elif ext == ".jsonl":
        _export_jsonl(records, path)
    elif ext == ".csv":
        _export_csv(records, path)
    else:
        raise ValueError(f"Unsupported file format '{ext}'. Use .txt, .json, .jsonl, or .csv.")


def _export_txt(records: list[str], path: Path) -> None:
    """Export records one per line, readable again as a list file."""
    path.write_text("".join(f"{r}\n" for r in records), encoding="utf-8", newline="\n")


def _export_json(records: list[str], path: Path) -> None:
    path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")


def _export_jsonl(records: list[str], path: Path) -> None:
    lines = [json.dumps({FIELD_RECORD: r}) for r in records]
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")


def _export_csv(records: list[str], path: Path) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=[FIELD_RECORD])
        writer.writeheader()
        for record in records:
            writer.writerow({FIELD_RECORD: record})
