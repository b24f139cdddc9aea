# taskkiller: type a query, kill what it finds
from taskkiller.helpers.logging import log_results
from taskkiller.helpers.processPaths import try_get_process_filename
from taskkiller.helpers.searching import get_matching_processes, display_name
from taskkiller.capabilities.close import try_kill, kill_similar
import psutil

MAX_LISTED = 25


def _name_or_blank(p):
    try:
        return display_name(p)
    except psutil.Error:
        return ""


def rank(query):
    """Best match first; ties (and the empty query) fall back to name order."""
    results = get_matching_processes(query)
    return sorted(results, key=lambda r: (-r.score, _name_or_blank(r.process).lower(), r.process.pid))


def format_result(result):
    """(title, subtitle) the way a launcher row shows a process."""
    p = result.process
    title = f"{_name_or_blank(p)} - {p.pid}"
    subtitle = try_get_process_filename(p) or "<path unavailable>"
    return title, subtitle


def parse_and_act(utterance):
    u = utterance.strip()
    if not u:
        return "Didn’t catch that."
    low = u.lower()

    # listing
    if low == "list" or low.startswith("list "):
        query = u[4:].strip()
        if query.lower() == "processes":
            query = ""
        results = rank(query)[:MAX_LISTED]
        log_results(results)
        return f"Listed {len(results)} processes."

    # killing every instance of a binary; a bare "kill all" must never fall through to a single kill
    if low == "kill all":
        return 'Say "kill all <query>" to kill every instance of a program.'
    if low.startswith("kill all "):
        query = u[len("kill all "):].strip()
        results = rank(query)
        if not results:
            return f"Couldn’t find a process like “{query}”."
        title, _ = format_result(results[0])
        gone, alive = kill_similar(results[0].process)
        msg = f"Killed {gone} instance(s) of {title}"
        if alive:
            msg += f", {alive} still running"
        return msg + "."

    # killing one process
    if low.startswith("kill "):
        query = u[len("kill "):].strip()
        results = rank(query)
        if not results:
            return f"Couldn’t find a process like “{query}”."
        target = results[0]
        title, _ = format_result(target)
        try_kill(target.process)
        if target.process.is_running():
            return f"Asked {title} to close, but it may still be running."
        return f"Killed {title}."

    return 'Say "list <query>", "kill <query>" or "kill all <query>".'


def main():
    print('Type "list <query>", "kill <query>" or "kill all <query>" (Ctrl+C to quit).')
    while True:
        try:
            utt = input("> ")
        except (KeyboardInterrupt, EOFError):
            print()
            break
        resp = parse_and_act(utt)
        print(resp)


if __name__ == "__main__":
    main()
