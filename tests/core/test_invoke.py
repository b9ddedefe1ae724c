import logging
import threading

from inspector_button.core.button import button
from inspector_button.core.catalog import build_catalog
from inspector_button.core.host import EditorHost
from inspector_button.core.invoke import invoke_action
from inspector_button.core.scene import Component, Scene

CALLS: list[str] = []


class Counter(Component):
    def __init__(self, name: str, *, fail: bool = False) -> None:
        super().__init__(name)
        self.value = 0
        self.fail = fail

    @button
    def add(self, amount: int = 1) -> None:
        if self.fail:
            raise ValueError(f"{self.name} refused")
        self.value += amount

    @button
    @staticmethod
    def ping() -> None:
        CALLS.append("ping")

    @button
    @staticmethod
    def explode() -> None:
        raise RuntimeError("static failure")


def _descriptor(name: str):
    return next(d for d in build_catalog(Counter) if d.method_name == name)


def _host_with(*objects) -> EditorHost:
    scene = Scene("test")
    for obj in objects:
        scene.add(obj)
    return EditorHost(scene=scene)


def test_static_button_runs_once_even_without_targets() -> None:
    CALLS.clear()
    host = _host_with()

    report = invoke_action(_descriptor("ping"), [], host=host)

    assert CALLS == ["ping"]
    assert report.n_calls == 1
    assert len(host.undo) == 0
    assert host.scene.dirty is False


def test_static_button_runs_once_for_many_targets() -> None:
    CALLS.clear()
    targets = [Counter("a"), Counter("b")]

    invoke_action(_descriptor("ping"), targets, host=_host_with(*targets))

    assert CALLS == ["ping"]


def test_static_failure_is_logged(capture_button_logs) -> None:
    report = invoke_action(_descriptor("explode"), [], host=_host_with())

    assert report.n_calls == 1
    assert report.failed[0][1].message == "static failure"
    errors = [r.getMessage() for r in capture_button_logs.records if r.levelno == logging.ERROR]
    assert errors == ["Error executing static method 'Explode': static failure"]


def test_instance_button_continues_past_failures(capture_button_logs) -> None:
    a, b, c = Counter("a"), Counter("b", fail=True), Counter("c")
    host = _host_with(a, b, c)
    descriptor = _descriptor("add")
    descriptor.parameters[0].value = 5

    report = invoke_action(descriptor, [a, b, c], host=host)

    assert (a.value, b.value, c.value) == (5, 0, 5)
    assert report.succeeded == [a, c]
    assert [t for t, _ in report.failed] == [b]
    assert host.is_dirty(a) and host.is_dirty(c)
    assert not host.is_dirty(b)
    assert host.scene.dirty is True

    errors = [r.getMessage() for r in capture_button_logs.records if r.levelno == logging.ERROR]
    assert errors == ["Error executing 'Add' on 'b': b refused"]


def test_undo_is_recorded_before_each_call() -> None:
    a, b = Counter("a"), Counter("b")
    host = _host_with(a, b)

    invoke_action(_descriptor("add"), [a, b], host=host)

    assert host.undo.labels() == ["Execute Add on a", "Execute Add on b"]
    assert (a.value, b.value) == (1, 1)

    host.undo.undo()
    host.undo.undo()
    assert (a.value, b.value) == (0, 0)


def test_scene_stays_clean_in_play_mode() -> None:
    a = Counter("a")
    host = _host_with(a)
    host.is_playing = True

    invoke_action(_descriptor("add"), [a], host=host)

    assert a.value == 1
    assert host.is_dirty(a)
    assert host.scene.dirty is False


def test_instance_button_with_no_targets_does_nothing() -> None:
    host = _host_with()

    report = invoke_action(_descriptor("add"), [], host=host)

    assert report.n_calls == 0
    assert host.scene.dirty is False


class Worker(Component):
    def __init__(self, name: str, *, lock: bool = False) -> None:
        super().__init__(name)
        self.runs = 0
        self.lock = threading.Lock() if lock else None

    @button
    def work(self) -> None:
        self.runs += 1


def test_target_that_cannot_be_snapshotted_still_runs(capture_button_logs) -> None:
    a, b, c = Worker("a"), Worker("b", lock=True), Worker("c")
    host = _host_with(a, b, c)
    descriptor = next(d for d in build_catalog(Worker) if d.method_name == "work")

    report = invoke_action(descriptor, [a, b, c], host=host)

    assert (a.runs, b.runs, c.runs) == (1, 1, 1)
    assert report.succeeded == [a, b, c]
    assert host.scene.dirty is True
    assert host.undo.labels() == ["Execute Work on a", "Execute Work on b", "Execute Work on c"]
    warnings = [r.getMessage() for r in capture_button_logs.records if r.levelno == logging.WARNING]
    assert any("Execute Work on b" in m for m in warnings)
