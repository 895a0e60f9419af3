import json

import pytest

from countdown_timeline.io.events import EventLoadError, events_from_records, load_events

T0 = 1_700_000_000.0


def test_records_accept_wire_names_and_epoch_dates():
    events = events_from_records(
        [
            {"date": "2023-11-14T22:13:20Z", "timeDelta": 3600, "description": "start"},
            {"date": T0 + 60, "time_delta": -30, "frozen": True},
        ]
    )

    assert events[0].timestamp == T0
    assert events[0].time_delta == 3600
    assert events[1].timestamp == T0 + 60
    assert events[1].frozen is True
    assert events[1].description == ""


def test_naive_dates_are_utc():
    (event,) = events_from_records([{"date": "2023-11-14T22:13:20", "timeDelta": 0}])

    assert event.timestamp == T0


def test_invalid_record_raises_load_error():
    with pytest.raises(EventLoadError, match="index 1"):
        events_from_records([{"date": T0, "timeDelta": 1}, {"date": "soon", "timeDelta": 1}])


def test_load_json_list_and_wrapper(tmp_path):
    records = [{"date": T0, "timeDelta": 10, "description": "a"}]
    plain = tmp_path / "events.json"
    plain.write_text(json.dumps(records), encoding="utf-8")
    wrapped = tmp_path / "wrapped.json"
    wrapped.write_text(json.dumps({"events": records}), encoding="utf-8")

    assert load_events(plain) == load_events(wrapped)
    assert load_events(plain)[0].description == "a"


def test_load_csv_with_header_aliases(tmp_path):
    path = tmp_path / "log.csv"
    path.write_text(
        "Timestamp,Delta,Label,Paused\n"
        "2023-11-14T22:13:20Z,3600,start,no\n"
        "2023-11-15T00:00:00Z,-60,,yes\n",
        encoding="utf-8",
    )

    events = load_events(path)

    assert [e.time_delta for e in events] == [3600, -60]
    assert [e.frozen for e in events] == [False, True]
    assert events[1].description == ""


def test_csv_missing_columns(tmp_path):
    path = tmp_path / "log.csv"
    path.write_text("label\nonly\n", encoding="utf-8")

    with pytest.raises(EventLoadError, match="missing column"):
        load_events(path)


def test_unsupported_or_missing_files(tmp_path):
    with pytest.raises(EventLoadError):
        load_events(tmp_path / "events.xml")
    with pytest.raises(EventLoadError):
        load_events(tmp_path / "absent.json")
