import json
import time
from collections import Counter
from typing import Any

from catchup.revision import Revision


class ResolutionReport:
    def __init__(self, branch_spec: str, is_poll_call: bool):
        self.branch_spec = branch_spec
        self.is_poll_call = is_poll_call
        self.revisions: list[Revision] = []
        self.start_time = time.time()

    def add_revisions(self, revisions: list[Revision]):
        self.revisions.extend(revisions)

    def generate_report(self, path: str):
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "branch_spec": self.branch_spec,
                "mode": "poll" if self.is_poll_call else "build",
                "total_revisions": len(self.revisions),
            },
            "revisions": [
                {"sha1": r.sha1, "branches": r.branch_names()}
                for r in self.revisions
            ],
            "stats": self._compute_stats(),
        }

        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)

    def _compute_stats(self) -> dict[str, Any]:
        branch_counts: Counter[str] = Counter()
        for r in self.revisions:
            branch_counts.update(r.branch_names())
        return {"branch_counts": dict(branch_counts)}
