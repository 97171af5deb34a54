"""Command line entry point for the catchup revision resolver."""

import argparse

from catchup.run_resolution import run_resolution


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the resolver CLI."""
    ap = argparse.ArgumentParser(
        prog="catchup",
        description=(
            "List the commits a CI job would build for a branch, tag, ref or "
            "commit spec, oldest first."
        ),
    )
    ap.add_argument(
        "branch_spec",
        help="Branch name, remote branch, tag, ref path or commit id",
    )
    ap.add_argument(
        "--repo",
        help="Path to the local mirror (default: from config, else '.')",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--remote",
        action="append",
        help="Remote name to qualify branches against (repeatable, in order)",
    )
    ap.add_argument(
        "--poll",
        action="store_true",
        help="Poll for new commits instead of selecting build targets",
    )
    ap.add_argument(
        "--history",
        help="Path to the build history JSON file",
    )
    ap.add_argument(
        "--job",
        help="Job name in the build history",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON resolution report to this path",
    )
    ap.add_argument(
        "--mark-built",
        action="store_true",
        help="Record the newest candidate as the job's last build",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Trace every qualification attempt and skip decision",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the resolver CLI."""
    args = build_parser().parse_args(argv)
    return run_resolution(args)


if __name__ == "__main__":
    raise SystemExit(main())
