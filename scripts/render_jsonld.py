# scripts/render_jsonld.py
#!/usr/bin/env python
"""
Render JSON-LD / person roles from a content export, e.g.

    python scripts/render_jsonld.py --settings export/siteSettings.json --events export/events.jsonl
"""
import argparse, json, logging, sys
from pathlib import Path
from typing import Any, Dict, List

from pdi_site.config import configure_logging
from pdi_site.models.content import EventRecord, PersonRecord, SiteSettings
from pdi_site.services.jsonld import MissingLocationError, build_event_schema, build_organization_schema
from pdi_site.services.people import get_person_role

logger = logging.getLogger("render_jsonld")

def _load_records(path: Path) -> List[Dict[str, Any]]:
    """JSON array, single JSON object, or JSONL (one document per line)."""
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".jsonl":
        return [json.loads(line) for line in text.splitlines() if line.strip()]
    data = json.loads(text)
    return data if isinstance(data, list) else [data]

def main():
    ap = argparse.ArgumentParser(description="Content export -> JSON-LD")
    ap.add_argument("--settings", type=Path, default=None, help="Site settings document (JSON)")
    ap.add_argument("--events", type=Path, default=None, help="Event documents (JSON array or .jsonl)")
    ap.add_argument("--people", type=Path, default=None, help="Person documents; prints resolved roles")
    ap.add_argument("--indent", type=int, default=2)
    args = ap.parse_args()
    configure_logging()

    out: Dict[str, Any] = {}
    if args.settings:
        settings = SiteSettings.model_validate(_load_records(args.settings)[0])
        out["organization"] = build_organization_schema(settings)

    if args.events:
        events = []
        for raw in _load_records(args.events):
            event = EventRecord.model_validate(raw)
            try:
                events.append(build_event_schema(event))
            except MissingLocationError as e:
                logger.warning("Skipping event: %s", e)
        out["events"] = events

    if args.people:
        out["people"] = [
            {"id": raw.get("_id"), "name": raw.get("name"), "role": get_person_role(PersonRecord.model_validate(raw))}
            for raw in _load_records(args.people)
        ]

    if not out:
        ap.error("nothing to render: pass --settings, --events and/or --people")

    json.dump(out, sys.stdout, indent=args.indent, ensure_ascii=False)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
