"""Resolve which commits a CI job should build for a branch spec."""

from catchup.build_record import BuildRecord
from catchup.candidate_enumerator import enumerate_candidates
from catchup.git_client import GitClient, GitError
from catchup.git_result import GitQueryResult
from catchup.load_config import load_config
from catchup.ref_qualifier import qualify_branch_spec
from catchup.remote import Remote
from catchup.revision import Branch, Revision
from catchup.revision_resolver import RevisionResolver

__all__ = [
    "Branch",
    "BuildRecord",
    "GitClient",
    "GitError",
    "GitQueryResult",
    "Remote",
    "Revision",
    "RevisionResolver",
    "enumerate_candidates",
    "load_config",
    "qualify_branch_spec",
]
