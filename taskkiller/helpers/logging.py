from taskkiller.helpers.processPaths import try_get_process_filename
from taskkiller.helpers.searching import display_name
import psutil


def log_exception(message, exc, source):
    """One tagged line per failure. Never raises, even if stdout is gone."""
    try:
        print(f"[{source}] {message}: {type(exc).__name__}: {exc}")
    except (OSError, ValueError):
        pass


def log_results(results, resolver=None):
    print("\n=== Matching Processes ===")
    for r in results:
        try:
            name = display_name(r.process)
        except psutil.Error:
            continue
        path = try_get_process_filename(r.process, resolver) or "<path unavailable>"
        print(f"{name} - {r.process.pid}  (score {r.score})")
        print(f"   -> {path}")
    print("==========================\n")
