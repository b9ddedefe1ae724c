import enum
import inspect
from dataclasses import dataclass

from inspector_button.core.button import button
from inspector_button.core.introspection import TargetKind, TypeIntrospector
from inspector_button.core.scene import Component
from inspector_button.core.value_types import Vector3


class Base(Component):
    @button
    def inherited(self) -> None:
        return None


class Spawner(Base):
    def __init__(self) -> None:
        super().__init__()
        self.count = 0

    @button
    def spawn(self, n: int, *, offset: float = 0.5) -> int:
        self.count += n
        return self.count

    @button("Reset All")
    @staticmethod
    def reset_all() -> str:
        return "reset"

    @classmethod
    @button
    def make(cls, name: str) -> str:
        return f"{cls.__name__}:{name}"

    @button
    def _private_tool(self) -> None:
        raise RuntimeError("boom")

    def not_a_button(self) -> None:
        return None


class Empty(enum.Enum):
    pass


class Mode(enum.Enum):
    FIRST = "first"
    SECOND = "second"


class Flags(enum.Flag):
    A = 1
    B = 2


@dataclass
class NeedsArgs:
    x: int


def test_declared_methods_are_listed_in_declaration_order() -> None:
    handles = TypeIntrospector().declared_methods_with_marker(Spawner)

    assert [h.name for h in handles] == ["spawn", "reset_all", "make", "_private_tool"]
    kinds = {h.name: h.target_kind for h in handles}
    assert kinds["spawn"] is TargetKind.INSTANCE
    assert kinds["reset_all"] is TargetKind.STATIC
    assert kinds["make"] is TargetKind.STATIC
    assert all(h.declaring_type is Spawner for h in handles)


def test_parameters_skip_receiver_and_resolve_annotations() -> None:
    intro = TypeIntrospector()
    handles = {h.name: h for h in intro.declared_methods_with_marker(Spawner)}

    params = intro.parameters(handles["spawn"])
    assert [p.name for p in params] == ["n", "offset"]
    assert params[0].annotation is int
    assert params[0].has_default is False
    assert params[1].default == 0.5
    assert params[1].kind is inspect.Parameter.KEYWORD_ONLY

    assert [p.name for p in intro.parameters(handles["make"])] == ["name"]
    assert intro.parameters(handles["reset_all"]) == []


def test_invoke_returns_value_or_error() -> None:
    intro = TypeIntrospector()
    handles = {h.name: h for h in intro.declared_methods_with_marker(Spawner)}
    spawner = Spawner()

    ok = intro.invoke(handles["spawn"], spawner, [2], {"offset": 1.0})
    assert ok.ok and ok.value == 2

    static = intro.invoke(handles["reset_all"], None, [])
    assert static.ok and static.value == "reset"

    bound = intro.invoke(handles["make"], None, ["a"])
    assert bound.value == "Spawner:a"

    failed = intro.invoke(handles["_private_tool"], spawner, [])
    assert failed.ok is False
    assert isinstance(failed.error, RuntimeError)
    assert failed.message == "boom"


def test_default_construct() -> None:
    intro = TypeIntrospector()

    assert intro.default_construct(Vector3).value == Vector3(0.0, 0.0, 0.0)
    assert intro.default_construct(Mode).value is Mode.FIRST
    assert intro.default_construct(Flags).value == Flags(0)
    assert intro.default_construct(list[int]).value == []

    assert intro.default_construct(NeedsArgs).ok is False
    assert intro.default_construct(Empty).ok is False


def test_default_value_is_zero_only_for_value_semantic_types() -> None:
    intro = TypeIntrospector()

    assert intro.default_value(int) == 0
    assert intro.default_value(float) == 0.0
    assert intro.default_value(bool) is False
    assert intro.default_value(Vector3) == Vector3()
    assert intro.default_value(Mode) is Mode.FIRST

    assert intro.default_value(str) is None
    assert intro.default_value(Spawner) is None
    assert intro.default_value(list[int]) is None
    assert intro.default_value(dict) is None
    assert intro.default_value(Empty) is None


class Tuner(Component):
    @button
    def tune(self, speed: "float", target: "Vector3", broken: "MissingType") -> None:
        return None


def test_one_unresolvable_annotation_does_not_degrade_the_others() -> None:
    intro = TypeIntrospector()
    (handle,) = intro.declared_methods_with_marker(Tuner)

    params = {p.name: p.annotation for p in intro.parameters(handle)}

    assert params["speed"] is float
    assert params["target"] is Vector3
    assert params["broken"] == "MissingType"
