"""Orchestration logic for resolving candidate revisions from the command line."""

import argparse
import logging
import sys
from typing import Any

from catchup.build_history import BuildHistory
from catchup.git_client import GitClient, GitError
from catchup.load_config import load_config, remotes_from_config
from catchup.resolution_report import ResolutionReport
from catchup.revision import Revision
from catchup.revision_resolver import RevisionResolver

logger = logging.getLogger(__name__)


def run_resolution(args: argparse.Namespace) -> int:
    """Resolve the branch spec and print one line per candidate revision."""
    config = _init_config(args)
    logging.basicConfig(
        level=logging.INFO if config["verbose"] else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    history = BuildHistory(config["history"]["path"])
    history.load()
    job = config["history"]["job"]
    record = history.record_for(job)

    git = GitClient(config["repository"], config["git"]["executable"])
    resolver = RevisionResolver(
        git, remotes_from_config(config), verbose=config["verbose"]
    )
    report = ResolutionReport(args.branch_spec, args.poll)

    try:
        revisions = resolver.get_candidate_revisions(
            args.poll, args.branch_spec, record
        )
    except GitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    report.add_revisions(revisions)
    for rev in revisions:
        print(_format_revision(rev))

    if args.report:
        report.generate_report(args.report)

    if args.mark_built and revisions:
        # every candidate counts as built so diverged refs stop at them next poll
        for rev in revisions:
            history.mark_built(job, rev.sha1)
        newest = revisions[-1].sha1
        history.save()
        logger.info("Recorded %s as the last build of %s", newest, job)

    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command line overrides."""
    config = load_config(args.config)
    if args.repo:
        config["repository"] = args.repo
    if args.remote:
        config["remotes"] = list(args.remote)
    if args.history:
        config["history"]["path"] = args.history
    if args.job:
        config["history"]["job"] = args.job
    if args.verbose:
        config["verbose"] = True
    return config


def _format_revision(rev: Revision) -> str:
    return f"{rev.sha1} {','.join(rev.branch_names())}"
