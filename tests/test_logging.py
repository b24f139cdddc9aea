import builtins

from taskkiller.helpers.logging import log_exception, log_results
from taskkiller.helpers.searching import ProcessResult
from tests.fakes import FakeProcess


def test_log_exception_writes_tagged_line(capsys):
    log_exception("Failed to kill process 7", PermissionError("denied"), "close")

    out = capsys.readouterr().out
    assert out.strip() == "[close] Failed to kill process 7: PermissionError: denied"


def test_log_exception_never_raises(monkeypatch):
    def broken_print(*args, **kwargs):
        raise OSError("stdout closed")

    monkeypatch.setattr(builtins, "print", broken_print)

    log_exception("boom", RuntimeError("x"), "close")


def test_log_results_prints_name_pid_score_and_path(capsys):
    results = [
        ProcessResult(FakeProcess(20, "notepad.exe"), 88),
        ProcessResult(FakeProcess(30, "vlc"), 0),
    ]

    log_results(results, resolver=lambda pid: "C:\\npp.exe" if pid == 20 else None)

    out = capsys.readouterr().out
    assert "notepad - 20  (score 88)" in out
    assert "-> C:\\npp.exe" in out
    assert "vlc - 30  (score 0)" in out
    assert "<path unavailable>" in out
