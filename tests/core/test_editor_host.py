from inspector_button.core.host import EditorHost, UndoStack
from inspector_button.core.scene import Component, Scene, SceneObject


class Light(Component):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.intensity = 1.0
        self.target: SceneObject | None = None


class Marker(SceneObject):
    pass


def test_scene_objects_get_unique_ids_and_default_names() -> None:
    a, b = Marker(), Marker("named")

    assert a.instance_id != b.instance_id
    assert a.name == "Marker"
    assert b.name == "named"


def test_scene_add_ignores_duplicates_and_filters_by_type() -> None:
    scene = Scene()
    light = scene.add(Light("key"))
    scene.add(light)
    marker = scene.add(Marker())

    assert len(scene) == 2
    assert scene.objects_of_type(Light) == [light]
    assert scene.objects_of_type(SceneObject) == [light, marker]

    scene.remove(light)
    assert list(scene) == [marker]


def test_reference_candidates_come_from_scene() -> None:
    scene = Scene()
    light = scene.add(Light("key"))
    scene.add(Marker())

    assert EditorHost(scene=scene).reference_candidates(Component) == [light]


def test_undo_restores_state_but_keeps_references() -> None:
    light = Light("key")
    other = Marker("other")
    light.target = other
    undo = UndoStack()

    undo.record_object(light, "Edit")
    light.intensity = 5.0
    light.target = None

    record = undo.undo()
    assert record is not None and record.label == "Edit"
    assert light.intensity == 1.0
    assert light.target is other
    assert undo.undo() is None


def test_dirty_flags() -> None:
    host = EditorHost()
    light = Light("key")

    assert host.is_dirty(light) is False
    host.set_dirty(light)
    host.mark_scene_dirty()
    assert host.is_dirty(light) is True
    assert host.scene.dirty is True

    host.clear_dirty()
    assert host.is_dirty(light) is False
    assert host.scene.dirty is False


def test_snapshot_failure_records_stateless_entry(caplog) -> None:
    import logging
    import threading

    light = Light("key")
    light.guard = threading.Lock()
    undo = UndoStack()
    caplog.set_level(logging.WARNING, logger="inspector_button")

    undo.record_object(light, "Edit")
    light.intensity = 3.0

    record = undo.undo()
    assert record is not None and record.state is None
    assert light.intensity == 3.0
    assert any("Edit" in r.getMessage() for r in caplog.records)
