import json
import sys
from datetime import date, datetime
from pprint import pformat

from placeindex.exceptions import SerializationError
from placeindex.models import IndexDescriptor

LIST_HEADER = ("CTime", "MTime", "Index", "Pricing", "DataSource", "Description")


def _json_default(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(payload) -> str:
    try:
        return json.dumps(payload, default=_json_default)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"error marshalling json: {e}") from e


def search_envelope(resp: dict) -> dict:
    return {"Summary": resp.get("Summary"), "Results": resp.get("Results", [])}


def format_table(rows, separator: str = "", padding: int = 1) -> str:
    """Left-align columns; every cell but the last is padded and followed by ``separator``."""
    if not rows:
        return ""
    widths = {}
    for row in rows:
        for i, cell in enumerate(row[:-1]):
            widths[i] = max(widths.get(i, 0), len(cell))

    lines = []
    for row in rows:
        cells = [cell.ljust(widths[i] + padding) + separator for i, cell in enumerate(row[:-1])]
        cells.append(row[-1])
        lines.append("".join(cells))
    return "\n".join(lines) + "\n"


def _print(text: str, stream=None):
    print(text, file=stream or sys.stdout)


def present_create(resp: dict, json_output: bool = False, stream=None):
    if json_output:
        _print(to_json(resp), stream)
        return
    _print(f"Created index {resp.get('IndexName')} at {resp.get('CreateTime')} ({resp.get('IndexArn')})", stream)


def present_delete(index_name: str, resp: dict, json_output: bool = False, stream=None):
    if json_output:
        _print(to_json({"IndexName": index_name, **resp}), stream)
        return
    _print(f"Deleted index {index_name}", stream)


def present_update(resp: dict, json_output: bool = False, stream=None):
    if json_output:
        _print(to_json(resp), stream)
        return
    _print(f"Updated index {resp.get('IndexName')} at {resp.get('UpdateTime')} ({resp.get('IndexArn')})", stream)


def present_describe(resp: dict, json_output: bool = False, stream=None):
    if json_output:
        _print(to_json(resp), stream)
        return

    index = IndexDescriptor.from_response(resp)
    lines = [
        f"Index Name:   {index.name}",
        f"Description:  {index.description}",
        f"Pricing Plan: {index.pricing_plan}",
        f"Data Source:  {index.data_source}",
        f"Data Storage: {index.intended_use}",
        f"Create Time:  {resp.get('CreateTime', '')}",
        f"Update Time:  {resp.get('UpdateTime', '')}",
        f"Index ARN:    {resp.get('IndexArn', '')}",
    ]
    _print("\n".join(lines), stream)

    if index.tags:
        rows = [("Tags", "Value")] + [(k, v) for k, v in sorted(index.tags.items())]
        _print(format_table(rows).rstrip("\n"), stream)
    else:
        _print("Tags:        (none)", stream)


def present_list(resp: dict, json_output: bool = False, stream=None):
    if json_output:
        _print(to_json(resp), stream)
        return

    rows = [LIST_HEADER]
    for entry in resp.get("Entries", []):
        rows.append((
            str(entry.get("CreateTime", "")),
            str(entry.get("UpdateTime", "")),
            entry.get("IndexName", ""),
            entry.get("PricingPlan", ""),
            entry.get("DataSource", ""),
            entry.get("Description", ""),
        ))
    _print(format_table(rows, separator="|"), stream)


def present_search(resp: dict, json_output: bool = False, stream=None):
    envelope = search_envelope(resp)
    if json_output:
        _print(to_json(envelope), stream)
        return
    _print(pformat(envelope["Summary"]), stream)
    _print(pformat(envelope["Results"]), stream)
