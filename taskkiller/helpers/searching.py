from typing import NamedTuple
from fuzzywuzzy import fuzz
from taskkiller.helpers.processPaths import try_get_process_filename
import psutil

# names as the OS reports them minus ".exe"; killing any of these can take the session down
SYSTEM_PROCESSES = frozenset({
    "conhost",
    "svchost",
    "idle",
    "system",
    "rundll32",
    "csrss",
    "lsass",
    "lsm",
    "smss",
    "wininit",
    "winlogon",
    "services",
    "spoolsv",
    "explorer",
})
MIN_SCORE = 70

# psutil names that differ from what Task Manager and the denylist use
PSUTIL_NAME_ALIASES = {
    "system idle process": "Idle",
}


class ProcessResult(NamedTuple):
    process: psutil.Process
    score: int


def display_name(p) -> str:
    """Process name without a trailing '.exe' ('notepad.exe' -> 'notepad')."""
    info = getattr(p, "info", None) or {}
    name = info.get("name") or p.name()
    name = PSUTIL_NAME_ALIASES.get(name.lower(), name)
    return name[:-4] if name.lower().endswith(".exe") else name


def is_system_process(p) -> bool:
    try:
        return display_name(p).lower() in SYSTEM_PROCESSES
    except psutil.Error:
        return False  # gone or unreadable; the catalog never lists these anyway


def _is_subsequence(query, candidate):
    """True if the query letters appear in candidate in order ("ntpd" in "notepad")."""
    chars = [c for c in query.lower() if not c.isspace()]
    if not chars:
        return False
    rest = iter(candidate.lower())
    return all(c in rest for c in chars)


def fuzzy_score(query, candidate) -> int:
    """0 means no match; anything else is a 0-100 quality.

    WRatio scores whole-word and partial matches. Abbreviations like "np" for
    notepad score low there, so an in-order subsequence hit counts as MIN_SCORE.
    """
    score = fuzz.WRatio(query, candidate)
    if score >= MIN_SCORE:
        return score
    return MIN_SCORE if _is_subsequence(query, candidate) else 0


def _live_processes():
    """Yield (process, display name) for every readable non-system process."""
    for p in psutil.process_iter(["pid", "name"]):
        try:
            name = display_name(p)
        except psutil.Error:
            continue
        if name.lower() in SYSTEM_PROCESSES:
            continue
        yield p, name


def get_matching_processes(query, scorer=fuzzy_score):
    """
    Returns a ProcessResult for every running non-system process whose name+pid matches query.
    An empty query returns everything with score 0. Order is enumeration order.
    """
    processes = list(_live_processes())

    if not query or not query.strip():
        return [ProcessResult(p, 0) for p, _ in processes]

    results = []
    for p, name in processes:
        score = scorer(query, f"{name}{p.pid}")
        if score > 0:
            results.append(ProcessResult(p, score))
    return results


def get_similar_processes(path, resolver=None):
    """All non-system processes whose executable path is exactly `path`."""
    return [p for p, _ in _live_processes() if try_get_process_filename(p, resolver) == path]
