"""Parsing of raw git output and file status classification.

Everything here is pure so it can be tested without a repository.
"""

from typing import Iterable, List

from ..exceptions import MalformedGitOutputError
from ..models import DiffStat, DiffSummary
from ..schemas import FileStatus

LOCAL_BRANCH_PREFIX = "refs/heads/"
DEFAULT_REMOTE_NAMES = ("origin",)


def classify_file_status(insertions: int, deletions: int, legacy: bool = True) -> FileStatus:
    """Derive a file status from its line counts.

    With `legacy` set, an entry with no inserted and no deleted lines is
    reported as deleted, matching the behaviour clients already rely on.
    Otherwise it is reported as unchanged (renames, binary files, mode changes).
    """
    if insertions > 0 and deletions > 0:
        return FileStatus.MODIFIED
    if insertions > 0:
        return FileStatus.ADDED
    if deletions > 0 or legacy:
        return FileStatus.DELETED
    return FileStatus.UNCHANGED


def _parse_count(value: str, record: str) -> int:
    if not value.isdigit():
        raise MalformedGitOutputError(
            "Unexpected diff summary output", detail=f"bad count in record {record!r}"
        )
    return int(value)


def parse_numstat(output: str) -> DiffSummary:
    """Parse `git diff --numstat -z` output into a validated DiffSummary.

    Each record is ``added<TAB>deleted<TAB>path<NUL>``. Paths are not quoted.
    A rename or copy leaves the path field empty and is followed by the old
    and the new path, each NUL-terminated; the new path is reported.
    """
    files: List[DiffStat] = []
    fields = iter(output.split("\0"))
    for record in fields:
        if not record.strip():
            continue
        parts = record.split("\t", 2)
        if len(parts) != 3:
            raise MalformedGitOutputError(
                "Unexpected diff summary output", detail=f"cannot parse record {record!r}"
            )
        added, deleted, path = parts
        previous_path = None
        if not path:
            previous_path = next(fields, "")
            path = next(fields, "")
            if not previous_path or not path:
                raise MalformedGitOutputError(
                    "Unexpected diff summary output",
                    detail=f"rename without paths in record {record!r}",
                )
        if added == "-" and deleted == "-":
            files.append(
                DiffStat(
                    path=path,
                    previous_path=previous_path,
                    insertions=0,
                    deletions=0,
                    binary=True,
                )
            )
            continue
        files.append(
            DiffStat(
                path=path,
                previous_path=previous_path,
                insertions=_parse_count(added, record),
                deletions=_parse_count(deleted, record),
            )
        )
    return DiffSummary(files=files)


def normalize_branch_names(
    refnames: Iterable[str], remote_names: Iterable[str] = DEFAULT_REMOTE_NAMES
) -> List[str]:
    """Turn full refnames into a de-duplicated list of local branch names.

    Remote-tracking refs are dropped. A local branch whose first path segment
    is a remote name (``origin/feature``) is listed without that prefix.
    Order of first appearance is kept.
    """
    remotes = set(remote_names)
    names: List[str] = []
    seen = set()
    for ref in refnames:
        ref = ref.strip()
        if not ref.startswith(LOCAL_BRANCH_PREFIX):
            continue
        name = ref[len(LOCAL_BRANCH_PREFIX):]
        head, sep, rest = name.partition("/")
        if sep and rest and head in remotes:
            name = rest
        if name and name not in seen:
            seen.add(name)
            names.append(name)
    return names
