import psutil
from taskkiller.helpers.logging import log_exception
from taskkiller.helpers.processPaths import try_get_process_filename
from taskkiller.helpers.searching import get_similar_processes

KILL_WAIT_MS = 50


def try_kill(p):
    """Kill p and wait briefly for it to exit. Best effort: never raises."""
    try:
        if p.is_running():
            p.kill()
            p.wait(timeout=KILL_WAIT_MS / 1000)
    except psutil.TimeoutExpired:
        pass  # still exiting; callers re-check liveness if they care
    except Exception as e:
        log_exception(f"Failed to kill process {p.pid}", e, __name__)


def kill_similar(p, resolver=None):
    """Kill p and every other running instance of the same executable.

    Returns (gone, alive) counts after the kills, like close_entry always did.
    """
    path = try_get_process_filename(p, resolver)
    procs = get_similar_processes(path, resolver) if path else [p]
    if not procs:
        procs = [p]

    for proc in procs:
        try_kill(proc)

    alive = [proc for proc in procs if proc.is_running()]
    return len(procs) - len(alive), len(alive)
