import psutil
import pytest


@pytest.fixture
def process_table(monkeypatch):
    """Replace the live process table with a list of FakeProcess."""
    table = []

    def fake_process_iter(attrs=None):
        return iter(list(table))

    monkeypatch.setattr(psutil, "process_iter", fake_process_iter)
    return table


@pytest.fixture
def path_resolver(process_table):
    """Resolver reading FakeProcess.exe_path by pid."""

    def resolve(pid):
        for p in process_table:
            if p.pid == pid:
                return p.exe_path
        raise psutil.NoSuchProcess(pid)

    return resolve
