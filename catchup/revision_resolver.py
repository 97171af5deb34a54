"""Logic for choosing which revisions a build or poll should consider."""

import logging
from collections.abc import Sequence

from catchup.build_record import BuildRecord
from catchup.candidate_enumerator import enumerate_candidates
from catchup.git_result import GitLayer
from catchup.is_commit_hash import is_commit_hash
from catchup.ref_qualifier import qualify_branch_spec
from catchup.remote import Remote
from catchup.revision import Branch, Revision

logger = logging.getLogger(__name__)

DETACHED = "detached"


class RevisionResolver:
    """Resolves a branch spec to the revisions that still need building."""

    def __init__(
        self, git: GitLayer, remotes: Sequence[Remote], *, verbose: bool = False
    ) -> None:
        """Initialize the resolver with a Git layer and the configured remotes."""
        self.git = git
        self.remotes = list(remotes)
        self.verbose = verbose

    def get_candidate_revisions(
        self, is_poll_call: bool, branch_spec: str, record: BuildRecord
    ) -> list[Revision]:
        """Return the revisions to build for ``branch_spec``, oldest first per ref.

        In build mode a spec that looks like a commit id and resolves is built
        detached. Otherwise every qualified candidate ref is enumerated and the
        results merged by commit. When nothing is found the raw spec is tried
        once as a ref of its own (tags and other non-branch refs).
        """
        self._trace(
            "get_candidate_revisions(%s, %s) considering branches to build",
            is_poll_call,
            branch_spec,
        )

        if not is_poll_call and is_commit_hash(branch_spec):
            detached = self._resolve_detached(branch_spec)
            if detached:
                return [detached]

        merged: dict[str, Revision] = {}
        for fqbn in qualify_branch_spec(branch_spec, self.remotes, self._trace):
            self._merge(merged, self._enumerate(is_poll_call, fqbn, record))

        if not merged:
            self._merge(merged, self._enumerate(is_poll_call, branch_spec, record))
            if merged:
                self._trace("%s seems to be a non-branch reference (tag?)", branch_spec)

        return list(merged.values())

    def _resolve_detached(self, branch_spec: str) -> Revision | None:
        parsed = self.git.rev_parse(branch_spec)
        if not parsed.found:
            # may still be a branch, e.g. one called "badface"
            self._trace("Not a valid SHA1 %s", branch_spec)
            return None

        sha1 = parsed.commits[0]
        self._trace("Will build the detached SHA1 %s", sha1)
        return Revision(sha1, {Branch(DETACHED, sha1)})

    def _enumerate(
        self, is_poll_call: bool, ref: str, record: BuildRecord
    ) -> list[Revision]:
        return enumerate_candidates(
            self.git, ref, record, is_poll_call=is_poll_call, trace=self._trace
        )

    @staticmethod
    def _merge(merged: dict[str, Revision], revisions: list[Revision]) -> None:
        for rev in revisions:
            existing = merged.get(rev.sha1)
            if existing is None:
                merged[rev.sha1] = Revision(rev.sha1, set(rev.branches))
            else:
                existing.branches.update(rev.branches)

    def _trace(self, fmt: str, *args: object) -> None:
        """Write the message only when verbose mode is on."""
        if self.verbose:
            logger.info(fmt, *args)
