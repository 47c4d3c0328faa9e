"""Tests for ownership module."""

import subprocess

from conftest import FakeInventory

from portly.ownership import OwnershipResolver, SystemInventory


def test_owned_when_holder_in_app_pids():
    """Test that a port held by one of the app's pids is owned."""
    inventory = FakeInventory(port_holder="1234\n", app_pids="1200\n1234\n")
    resolver = OwnershipResolver(inventory)

    assert resolver.is_owned_by("web", 4000)
    assert inventory.queries == [("port", 4000), ("app", "web")]


def test_not_owned_when_holder_is_foreign():
    """Test that a port held by another process is not owned."""
    inventory = FakeInventory(port_holder="999\n", app_pids="1234\n")

    assert not OwnershipResolver(inventory).is_owned_by("web", 4000)


def test_first_holder_line_used():
    """Test that only the first pid reported for the port is compared."""
    inventory = FakeInventory(port_holder="999\n1234\n", app_pids="1234\n")

    assert not OwnershipResolver(inventory).is_owned_by("web", 4000)


def test_port_query_failure_skips_app_query():
    """Test that a failed port query answers not owned without asking pm2."""
    inventory = FakeInventory(port_holder=None, app_pids="1234\n")

    assert not OwnershipResolver(inventory).is_owned_by("web", 4000)
    assert inventory.queries == [("port", 4000)]


def test_unparseable_holder():
    """Test that non-numeric lsof output answers not owned."""
    inventory = FakeInventory(port_holder="COMMAND PID\n", app_pids="1234\n")

    assert not OwnershipResolver(inventory).is_owned_by("web", 4000)


def test_app_query_failure():
    """Test that a failed pm2 query answers not owned."""
    inventory = FakeInventory(port_holder="1234\n", app_pids=None)

    assert not OwnershipResolver(inventory).is_owned_by("web", 4000)


def test_app_without_pids():
    """Test that an app with no numeric pids answers not owned."""
    inventory = FakeInventory(port_holder="1234\n", app_pids="\n[PM2] not found\n")

    assert not OwnershipResolver(inventory).is_owned_by("web", 4000)


def test_system_inventory_commands(monkeypatch):
    """Test the commands run by the system inventory."""
    commands = []

    def fake_run(command, **kwargs):
        commands.append(command)
        return subprocess.CompletedProcess(command, 0, stdout="1234\n", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    inventory = SystemInventory()

    assert inventory.port_holder(4000) == "1234\n"
    assert inventory.app_pids("web") == "1234\n"
    assert commands == [
        ["lsof", "-t", "-iTCP:4000", "-sTCP:LISTEN"],
        ["pm2", "pid", "web"],
    ]


def test_system_inventory_nonzero_exit(monkeypatch):
    """Test that a failing command yields None."""

    def fake_run(command, **kwargs):
        return subprocess.CompletedProcess(command, 1, stdout="", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)

    assert SystemInventory().port_holder(4000) is None


def test_system_inventory_missing_tool(monkeypatch):
    """Test that a missing tool yields None."""

    def fake_run(command, **kwargs):
        raise FileNotFoundError(command[0])

    monkeypatch.setattr(subprocess, "run", fake_run)

    assert SystemInventory().app_pids("web") is None


def test_system_inventory_timeout(monkeypatch):
    """Test that a hung command yields None."""

    def fake_run(command, **kwargs):
        raise subprocess.TimeoutExpired(command, kwargs["timeout"])

    monkeypatch.setattr(subprocess, "run", fake_run)

    assert SystemInventory(timeout=1).port_holder(4000) is None
