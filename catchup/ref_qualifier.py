"""Logic for expanding a branch spec into fully qualified candidate refs.

A spec such as ``main``, ``origin/main``, ``refs/heads/main`` or
``feature/x`` is ambiguous once several remotes are configured. Rather than
guess one reading, every structurally plausible qualification is produced per
remote, in a fixed order, and all of them are tried downstream.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from catchup.remote import Remote
from catchup.tracing import Trace

REFS_HEADS = "refs/heads/"
REFS_REMOTES = "refs/remotes/"


@dataclass(frozen=True)
class QualificationRule:
    """A named predicate + ref builder applied to one (spec, remote) pair."""

    name: str
    applies: Callable[[str, str], bool]
    build: Callable[[str, str], str]


# BRANCH is shorthand for */BRANCH
UNQUALIFIED_RULE = QualificationRule(
    "unqualified",
    lambda spec, remote: "/" not in spec,
    lambda spec, remote: f"{remote}/{spec}",
)

# First match wins for specs containing '/'; the last rule always applies.
QUALIFIED_RULES: tuple[QualificationRule, ...] = (
    QualificationRule(
        "remote_shorthand",
        lambda spec, remote: spec.startswith(f"{remote}/"),
        lambda spec, remote: REFS_REMOTES + spec,
    ),
    QualificationRule(
        "remotes_path",
        lambda spec, remote: spec.startswith(f"remotes/{remote}/"),
        lambda spec, remote: "refs/" + spec,
    ),
    QualificationRule(
        "local_head",
        lambda spec, remote: spec.startswith(REFS_HEADS),
        lambda spec, remote: f"{REFS_REMOTES}{remote}/{spec[len(REFS_HEADS):]}",
    ),
    QualificationRule(
        "as_is",
        lambda spec, remote: True,
        lambda spec, remote: spec,
    ),
)

# Branch names may themselves contain '/', e.g. feature/x
LITERAL_BRANCH_RULE = QualificationRule(
    "remote_branch_literal",
    lambda spec, remote: True,
    lambda spec, remote: f"{REFS_REMOTES}{remote}/{spec}",
)


def _first_match(
    rules: Sequence[QualificationRule], spec: str, remote: str
) -> QualificationRule:
    for rule in rules:
        if rule.applies(spec, remote):
            return rule
    msg = f"No qualification rule applies to {spec!r} for remote {remote!r}"
    raise ValueError(msg)


def qualify_branch_spec(
    branch_spec: str, remotes: Sequence[Remote], trace: Trace | None = None
) -> list[str]:
    """Return candidate refs for ``branch_spec`` in the order they should be tried."""
    candidates: list[str] = []
    for remote in remotes:
        if UNQUALIFIED_RULE.applies(branch_spec, remote.name):
            rules = [UNQUALIFIED_RULE]
        else:
            rules = [
                _first_match(QUALIFIED_RULES, branch_spec, remote.name),
                LITERAL_BRANCH_RULE,
            ]

        for rule in rules:
            fqbn = rule.build(branch_spec, remote.name)
            if trace:
                trace(
                    "Qualifying %s as a branch in repository %s -> %s (%s)",
                    branch_spec,
                    remote.name,
                    fqbn,
                    rule.name,
                )
            candidates.append(fqbn)
    return candidates
