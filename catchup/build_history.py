"""Logic for persisting which commits each job has built."""

import json
import logging
from pathlib import Path
from typing import Any

from catchup.build_record import BuildRecord

logger = logging.getLogger(__name__)

CURRENT_SCHEMA_VERSION = 1


class BuildHistory:
    """Manages a JSON file of per-job build records."""

    def __init__(self, path: str | Path) -> None:
        """Initialize the history with its storage path."""
        self.path = Path(path)
        self.jobs: dict[str, dict[str, Any]] = {}  # job -> {last_built, built}
        self.dirty = False

    def load(self) -> None:
        """Load the history from disk. Unreadable files are treated as empty."""
        if not self.path.exists():
            return

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))

            schema_ver = data.get("meta", {}).get("schema_version", 0)
            if schema_ver != CURRENT_SCHEMA_VERSION:
                logger.warning(
                    "Schema version mismatch (%s != %s). Ignoring build history.",
                    schema_ver,
                    CURRENT_SCHEMA_VERSION,
                )
                return

            jobs = {}
            for job, entry in data.get("jobs", {}).items():
                built = entry.get("built", [])
                if not isinstance(built, list):
                    msg = f"built commits of job {job!r} is not a list"
                    raise TypeError(msg)
                jobs[job] = {"last_built": entry.get("last_built"), "built": built}
            self.jobs = jobs

        except Exception:
            logger.exception("Error loading build history %s", self.path)

    def record_for(self, job: str) -> BuildRecord:
        """Return the build record of ``job``, empty if it never built."""
        entry = self.jobs.get(job)
        if not entry:
            return BuildRecord()
        return BuildRecord(entry["last_built"], set(entry["built"]))

    def mark_built(self, job: str, sha1: str) -> None:
        """Record ``sha1`` as the latest build of ``job``."""
        entry = self.jobs.setdefault(job, {"last_built": None, "built": []})
        if entry["last_built"] != sha1:
            entry["last_built"] = sha1
            self.dirty = True
        if sha1 not in entry["built"]:
            entry["built"].append(sha1)
            self.dirty = True

    def save(self) -> None:
        """Write the history to disk."""
        if not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)

        self.path.write_text(
            json.dumps(
                {
                    "meta": {"schema_version": CURRENT_SCHEMA_VERSION},
                    "jobs": self.jobs,
                },
                indent=2,
                sort_keys=True,
            ),
            encoding="utf-8",
        )
        self.dirty = False
