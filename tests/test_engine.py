import pytest

from wadengine.engine import GameState
from wadengine.entities import Monster, MonsterType, Projectile, Transform


def test_game_time_accumulates():
    state = GameState()
    state.update(0.25, None)
    state.update(0.5, None)
    assert state.game_time == pytest.approx(0.75)
    assert state.current_map is None


def test_negative_delta_is_rejected():
    state = GameState()
    with pytest.raises(ValueError):
        state.update(-0.1, None)
    assert state.game_time == 0.0


def test_update_moves_monsters_towards_player():
    state = GameState()
    monster = state.world.spawn_entity(
        300.0, 0.0, Monster(100, MonsterType.IMP), "TROOA1"
    )
    state.update(1.0, Transform(0.0, 0.0))
    assert 0.0 < monster.transform.x < 300.0
    assert monster.transform.y == pytest.approx(0.0)


def test_update_moves_projectiles_without_player():
    state = GameState()
    shot = state.world.spawn_entity(0.0, 0.0, Projectile(10, (4.0, -2.0)), "MISLA1")
    state.update(0.5, None)
    assert (shot.transform.x, shot.transform.y) == pytest.approx((2.0, -1.0))