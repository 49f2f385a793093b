import sys, pathlib
repo = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(repo))
sys.path.insert(0, str(repo / "scripts"))

import json, logging

import render_jsonld
from pdi_site.services.lookups import PEOPLE_CATEGORIES

EVENTS = [
    {"_id": "event-no-place", "title": "Unplaced Talk", "place": [], "details": {"startDate": "2024-05-01"}},
    {
        "_id": "event-ok",
        "title": "Nowruz Lecture",
        "place": [{"name": "Royce Hall 306", "location": {"addressCountry": "US"}}],
        "details": {"startDate": "2024-05-01", "startTime": "10:00", "endTime": "12:00"},
    },
]

def run(monkeypatch, capsys, *argv):
    monkeypatch.setattr(sys, "argv", ["render_jsonld.py", *argv])
    render_jsonld.main()
    return json.loads(capsys.readouterr().out)

def test_events_without_place_are_skipped(tmp_path, monkeypatch, capsys, caplog):
    path = tmp_path / "events.jsonl"
    path.write_text("\n".join(json.dumps(e) for e in EVENTS) + "\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="render_jsonld"):
        out = run(monkeypatch, capsys, "--events", str(path))

    assert [e["name"] for e in out["events"]] == ["Nowruz Lecture"]
    assert out["events"][0]["startDate"] == "2024-05-01T10:00:00"
    assert out["events"][0]["endDate"] == "2024-05-01T12:00:00"
    skipped = [r for r in caplog.records if r.name == "render_jsonld"]
    assert len(skipped) == 1
    assert "Unplaced Talk" in skipped[0].getMessage()

def test_settings_and_people(tmp_path, monkeypatch, capsys):
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"siteName": "Pourdavoud Institute"}), encoding="utf-8")
    people = tmp_path / "people.json"
    people.write_text(json.dumps([
        {"_id": "p1", "name": "Ada", "affiliationType": "external", "institution": "Harvard"},
        {
            "_id": "p2",
            "name": "Bahram",
            "categories": [{"_id": PEOPLE_CATEGORIES["gradStudent"]["id"]}],
            "department": "nelc",
        },
    ]), encoding="utf-8")

    out = run(monkeypatch, capsys, "--settings", str(settings), "--people", str(people))

    assert out["organization"]["name"] == "Pourdavoud Institute"
    assert out["people"] == [
        {"id": "p1", "name": "Ada", "role": "Harvard"},
        {"id": "p2", "name": "Bahram", "role": "Graduate Student, Near Eastern Languages and Cultures"},
    ]
