from __future__ import annotations

from datetime import tzinfo
from typing import Any

from sqlalchemy.orm import Session

from ..scheduling.analytics import summarize
from ..scheduling.time_window import find_conflicts
from .lookup import diagnostic_to_dict, event_to_dict
from .snapshot import load_snapshot


def analytics_report(db: Session, *, tz: tzinfo) -> dict[str, Any]:
    """Dashboard statistics over the whole snapshot."""
    snapshot = load_snapshot(db)
    normalized = snapshot.normalized(tz)
    report = summarize(list(normalized.events), snapshot.screens, tz)
    report["diagnostics"] = [diagnostic_to_dict(d) for d in normalized.diagnostics]
    return report


def list_conflicts(db: Session, *, tz: tzinfo) -> dict[str, Any]:
    """Every pair of overlapping events sharing a screen."""
    snapshot = load_snapshot(db)
    slugs = {s.id: s.slug for s in snapshot.screens}
    conflicts = [
        {
            "first": event_to_dict(c.first, tz),
            "second": event_to_dict(c.second, tz),
            "screens": sorted(slugs.get(sid, sid) for sid in c.screen_ids),
        }
        for c in find_conflicts(snapshot.normalized(tz).events)
    ]
    return {"conflicts": conflicts, "count": len(conflicts)}


__all__ = ["analytics_report", "list_conflicts"]
