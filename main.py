"""
どこで: リポジトリ直下 `main.py`。
何を: `@button` 付きのコンポーネントを並べたシーンを作り、インスペクターで表示する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

import sys

sys.path.append("src")

import enum
import logging
from dataclasses import dataclass

from inspector_button import Component, Scene, button, run, serialize_field
from inspector_button.core.value_types import Color, Vector3

_logger = logging.getLogger("inspector_button.demo")


class Team(enum.Enum):
    RED = "red"
    BLUE = "blue"


@dataclass
class SpawnSettings:
    count: int = 3
    spacing: float = 1.5
    tint: Color = Color(1.0, 0.5, 0.0, 1.0)
    _seed: int = serialize_field(default=0)


class Spawner(Component):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.spawned: list[Vector3] = []
        self.target: Component | None = None

    @button("Say Hello")
    def say_hello(self) -> None:
        _logger.info("Hello from %s", self.name)

    @button
    def spawn_row(self, origin: Vector3, settings: SpawnSettings, team: Team = Team.RED) -> None:
        for i in range(settings.count):
            self.spawned.append(Vector3(origin.x + i * settings.spacing, origin.y, origin.z))
        _logger.info("%s spawned %d for %s", self.name, settings.count, team.value)

    @button
    def follow(self, target: Component, offsets: tuple[float, ...] = ()) -> None:
        self.target = target
        _logger.info("%s follows %s", self.name, target)

    @button
    def explode(self) -> None:
        raise RuntimeError(f"{self.name} cannot explode")

    @button
    @staticmethod
    def clear_all_caches() -> None:
        _logger.info("caches cleared")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    scene = Scene("demo")
    a = scene.add(Spawner("Spawner A"))
    b = scene.add(Spawner("Spawner B"))
    host = run([a, b], scene=scene)
    _logger.info("undo history: %s", host.undo.labels())
