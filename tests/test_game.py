import pytest

from puttsim.arrow import Arrow, ArrowState
from puttsim.game import SCREEN_HEIGHT, SCREEN_WIDTH, Game
from puttsim.gameobject import GameObject
from puttsim.golfball import GolfBall
from puttsim.input import Key
from puttsim.scenes import ResultScene, SceneName, Stage1Scene, TitleScene
from puttsim.sprite import Sprite


class _Probe(GameObject):
    def __init__(self, game=None, camera=None):
        super().__init__(game, camera)
        self.uninit_calls = 0
        self.updates = 0

    def update(self):
        self.updates += 1

    def uninit(self):
        self.uninit_calls += 1


def test_default_screen_size():
    game = Game()
    assert (game.width, game.height) == (SCREEN_WIDTH, SCREEN_HEIGHT)
    assert (SCREEN_WIDTH, SCREEN_HEIGHT) == (1280, 720)


def test_update_before_start_raises():
    with pytest.raises(RuntimeError):
        Game().update()


def test_start_opens_title():
    game = Game()
    game.start()
    assert isinstance(game.scene, TitleScene)
    assert len(game.get_objects(Sprite)) == 1


def test_add_object_initialises_and_registers():
    game = Game()
    arrow = game.add_object(Arrow)
    assert arrow.state == ArrowState.DIRECTION
    assert arrow.game is game
    assert game.get_objects(Arrow) == [arrow]
    assert game.get_objects(GolfBall) == []


def test_get_objects_keeps_order():
    game = Game()
    first = game.add_object(_Probe)
    game.add_object(Arrow)
    second = game.add_object(_Probe)
    assert game.get_objects(_Probe) == [first, second]
    assert len(game.get_objects(GameObject)) == 3


def test_delete_object_uninits_and_removes():
    game = Game()
    probe = game.add_object(_Probe)
    other = game.add_object(_Probe)
    game.delete_object(probe)
    assert probe.uninit_calls == 1
    assert game.objects == (other,)


def test_delete_none_and_foreign_object():
    game = Game()
    kept = game.add_object(_Probe)
    game.delete_object(None)
    stranger = _Probe()
    game.delete_object(stranger)
    assert stranger.uninit_calls == 1
    assert game.objects == (kept,)


def test_delete_all_objects():
    game = Game()
    probes = [game.add_object(_Probe) for _ in range(3)]
    game.delete_all_objects()
    assert game.objects == ()
    assert all(p.uninit_calls == 1 for p in probes)


def test_update_runs_objects():
    game = Game()
    game.start()
    probe = game.add_object(_Probe)
    game.update()
    game.update()
    assert probe.updates == 2


def test_enter_key_starts_stage_on_next_frame():
    keys = set()
    game = Game(key_source=lambda: keys)
    game.start()
    keys.add(Key.RETURN)
    game.update()
    assert isinstance(game.scene, TitleScene)
    game.update()
    assert isinstance(game.scene, Stage1Scene)
    assert game.input.key_press(Key.RETURN)


def test_draw_returns_world_matrices():
    game = Game()
    game.start()
    sprite = game.get_objects(Sprite)[0]
    assert game.draw() == [sprite.world_matrix()]


def test_draw_skips_hidden_objects():
    game = Game()
    arrow = game.add_object(Arrow)
    arrow.set_state(ArrowState.HIDDEN)
    probe = game.add_object(_Probe)
    assert game.draw() == [probe.world_matrix()]


def test_change_scene_replaces_objects():
    game = Game()
    game.start()
    old = game.get_objects(Sprite)[0]
    game.change_scene(SceneName.TITLE)
    sprites = game.get_objects(Sprite)
    assert len(sprites) == 1
    assert sprites[0] is not old


def test_stage_score_carries_to_result():
    game = Game()
    game.start()
    game.change_scene(SceneName.STAGE1)
    stage = game.scene
    stage.stroke_count = 5
    game.change_scene(SceneName.RESULT)
    assert isinstance(game.scene, ResultScene)
    assert game.scene.objects[1].num_v == 7
    assert game.get_objects(GolfBall) == []


def test_result_from_title_uses_zero_score():
    game = Game()
    game.start()
    game.change_scene(SceneName.RESULT)
    assert game.scene.objects[1].num_v == 6


def test_shutdown_clears_objects():
    game = Game()
    game.start()
    game.shutdown()
    assert game.objects == ()