"""The game: owns the objects, the camera, the input and the current scene."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple, Type, TypeVar

from puttsim.camera import Camera
from puttsim.gameobject import GameObject, Scene
from puttsim.input import ControllerState, InputState
from puttsim.math3d import Matrix
from puttsim.scenes import ResultScene, SceneName, Stage1Scene, TitleScene

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720

T = TypeVar("T", bound=GameObject)


class Game:
    """Runs one frame at a time: scene, camera, input, then every object."""

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        key_source: Optional[Callable[[], Iterable[int]]] = None,
        controller_source: Optional[Callable[[], Optional[ControllerState]]] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.input = InputState()
        self.camera = Camera(self)
        self.scene: Optional[Scene] = None
        self._objects: List[GameObject] = []
        self._key_source = key_source or (lambda: ())
        self._controller_source = controller_source or (lambda: None)

    @property
    def objects(self) -> Tuple[GameObject, ...]:
        return tuple(self._objects)

    def start(self) -> None:
        """Initialise the camera and open the title scene."""
        self.camera.init()
        self.scene = TitleScene(self)

    def update(self) -> None:
        if self.scene is None:
            raise RuntimeError("game has not been started")
        self.scene.update()
        self.camera.update()
        self.input.update(self._key_source(), self._controller_source())
        for obj in list(self._objects):
            obj.update()

    def draw(self) -> List[Matrix]:
        """World matrices of every visible object, in draw order."""
        self.camera.draw()
        return [m for m in (obj.draw() for obj in self._objects) if m is not None]

    def shutdown(self) -> None:
        self.delete_all_objects()
        self.camera.uninit()

    def add_object(self, cls: Type[T]) -> T:
        """Create an object of the given class, add it and initialise it."""
        obj = cls(self, self.camera)
        self._objects.append(obj)
        obj.init()
        return obj

    def get_objects(self, cls: Type[T]) -> List[T]:
        return [obj for obj in self._objects if isinstance(obj, cls)]

    def delete_object(self, obj: Optional[GameObject]) -> None:
        if obj is None:
            return
        obj.uninit()
        self._objects = [o for o in self._objects if o is not obj]

    def delete_all_objects(self) -> None:
        for obj in self._objects:
            obj.uninit()
        self._objects = []

    def change_scene(self, name: SceneName) -> None:
        """Close the current scene and open another; the stage's score carries to the result."""
        score = 0
        if self.scene is not None:
            if isinstance(self.scene, Stage1Scene):
                score = self.scene.score()
            self.scene.close()
            self.scene = None

        name = SceneName(name)
        if name == SceneName.TITLE:
            self.scene = TitleScene(self)
        elif name == SceneName.STAGE1:
            self.scene = Stage1Scene(self)
        else:
            result = ResultScene(self)
            result.set_score(score)
            self.scene = result