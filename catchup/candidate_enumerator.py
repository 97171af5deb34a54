"""Logic for listing the not-yet-built commits reachable from one ref."""

from catchup.build_record import BuildRecord
from catchup.git_result import GitLayer
from catchup.revision import Branch, Revision
from catchup.tracing import Trace, no_trace


def enumerate_candidates(
    git: GitLayer,
    ref: str,
    record: BuildRecord,
    *,
    is_poll_call: bool,
    trace: Trace | None = None,
) -> list[Revision]:
    """Return Revisions for commits on ``ref`` since the last build, oldest first.

    A ref that does not exist yields an empty list. In poll mode enumeration
    stops at the first commit that has already been built, which assumes
    history on the ref only moves forward. After a force-push or rebase,
    unbuilt commits older than a rebuilt one are not reported.
    """
    trace = trace or no_trace
    last = record.last_built_commit
    trace("Last known commit: %s", last)

    commits: list[str] = []
    if last:
        trace("Trying git rev-list %s..%s", last, ref)
        listed = git.rev_list(f"{last}..{ref}")
        if not listed.found:
            trace("Failed to rev-list: %s..%s (%s)", last, ref, listed.detail)
            return []
        commits = list(reversed(listed.commits))

    if not commits:
        tip = git.rev_parse(ref)
        if not tip.found:
            trace("Failed to rev-parse: %s (%s)", ref, tip.detail)
            return []
        commits = tip.commits

    revisions: list[Revision] = []
    for sha1 in commits:
        if is_poll_call and record.has_been_built(sha1):
            trace("%s has already been built", sha1)
            break

        trace("Found a new commit %s to be built on %s", sha1, ref)
        revisions.append(Revision(sha1, {Branch(ref, sha1)}))
    return revisions
