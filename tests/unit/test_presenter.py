import io
import json
from datetime import datetime, timezone

import pytest

from placeindex import presenter
from placeindex.exceptions import SerializationError


def _render(fn, *args, **kwargs):
    out = io.StringIO()
    fn(*args, stream=out, **kwargs)
    return out.getvalue()

def test_describe_human(describe_response):
    text = _render(presenter.present_describe, describe_response)

    assert "Index Name:   test-index\n" in text
    assert "Description:  test index\n" in text
    assert "Pricing Plan: RequestBasedUsage\n" in text
    assert "Data Source:  Here\n" in text
    assert "Data Storage: SingleUse\n" in text
    assert "Create Time:  2024-01-02 03:04:05+00:00\n" in text
    assert "Index ARN:    arn:aws:geo:" in text
    assert "Tags Value\n" in text
    assert "env  prod\n" in text

def test_describe_human_without_tags(describe_response):
    describe_response.pop("Tags")

    text = _render(presenter.present_describe, describe_response)

    assert text.endswith("Tags:        (none)\n")

def test_describe_json_encodes_datetimes(describe_response):
    text = _render(presenter.present_describe, describe_response, json_output=True)

    decoded = json.loads(text)
    assert decoded["IndexName"] == "test-index"
    assert decoded["CreateTime"] == "2024-01-02T03:04:05+00:00"
    assert decoded["Tags"] == {"env": "prod"}

def test_list_empty_prints_header_only():
    text = _render(presenter.present_list, {"Entries": []})

    lines = [line for line in text.splitlines() if line]
    assert lines == ["CTime |MTime |Index |Pricing |DataSource |Description"]

def test_list_rows_are_aligned():
    created = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    resp = {
        "Entries": [
            {
                "IndexName": "a",
                "Description": "first",
                "DataSource": "Here",
                "PricingPlan": "RequestBasedUsage",
                "CreateTime": created,
                "UpdateTime": created,
            },
            {
                "IndexName": "a-much-longer-name",
                "Description": "second",
                "DataSource": "Esri",
                "CreateTime": created,
                "UpdateTime": created,
            },
        ]
    }

    lines = [line for line in _render(presenter.present_list, resp).splitlines() if line]

    assert len(lines) == 3
    assert lines[1].endswith("|first")
    assert lines[2].endswith("|second")
    # separators line up in every row
    positions = {tuple(i for i, ch in enumerate(line) if ch == "|") for line in lines}
    assert len(positions) == 1

def test_search_json_envelope(position_response):
    text = _render(presenter.present_search, position_response, json_output=True)

    decoded = json.loads(text)
    assert set(decoded) == {"Summary", "Results"}
    assert decoded["Summary"]["Position"] == [-73.0, 40.0]
    assert decoded["Results"][0]["Place"]["Label"] == "1 Main St, New York, NY, USA"

def test_search_human_dump(position_response):
    text = _render(presenter.present_search, position_response)

    assert "'DataSource': 'Here'" in text
    assert "1 Main St, New York, NY, USA" in text

def test_create_confirmation():
    resp = {
        "IndexName": "foo",
        "IndexArn": "arn:aws:geo:us-east-1:123456789012:place-index/foo",
        "CreateTime": datetime(2024, 1, 2, tzinfo=timezone.utc),
    }

    text = _render(presenter.present_create, resp)

    assert text == "Created index foo at 2024-01-02 00:00:00+00:00 (arn:aws:geo:us-east-1:123456789012:place-index/foo)\n"

def test_delete_confirmation():
    assert _render(presenter.present_delete, "foo", {}) == "Deleted index foo\n"
    assert json.loads(_render(presenter.present_delete, "foo", {}, json_output=True)) == {"IndexName": "foo"}

def test_unencodable_payload():
    with pytest.raises(SerializationError, match="error marshalling json"):
        presenter.to_json({"value": object()})

def test_create_and_update_json():
    when = datetime(2024, 1, 2, tzinfo=timezone.utc)
    resp = {"IndexName": "foo", "IndexArn": "arn:aws:geo:us-east-1:123456789012:place-index/foo", "CreateTime": when}

    created = json.loads(_render(presenter.present_create, resp, json_output=True))
    assert created == {
        "IndexName": "foo",
        "IndexArn": "arn:aws:geo:us-east-1:123456789012:place-index/foo",
        "CreateTime": "2024-01-02T00:00:00+00:00",
    }

    updated = json.loads(_render(presenter.present_update, {"IndexName": "foo", "IndexArn": "arn", "UpdateTime": when}, json_output=True))
    assert updated == {"IndexName": "foo", "IndexArn": "arn", "UpdateTime": "2024-01-02T00:00:00+00:00"}
