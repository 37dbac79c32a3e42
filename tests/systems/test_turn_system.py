from skirmish.components.combat_stats import CombatStats
from skirmish.components.game_state import GamePhase
from skirmish.components.grid_position import GridPosition
from skirmish.errors import ErrorKind
from skirmish.events.bus import (
    EVENT_COMMAND_REJECTED,
    EVENT_GAME_OVER,
    EVENT_GAME_PHASE_CHANGED,
    EVENT_TURN_RESOLVED,
)
from skirmish.systems.combat_system import CombatSystem
from skirmish.systems.movement_system import MovementSystem
from skirmish.systems.persistence_system import PersistenceSystem
from skirmish.systems.turn_system import TurnSystem
from skirmish.utils.commands import Direction

from tests.helpers import ScriptedRandom, add_character, make_world


def _turns(world, bus, rng=None, save_path=None) -> TurnSystem:
    movement = MovementSystem(world, bus, CombatSystem(world, bus), rng=rng or ScriptedRandom())
    persistence = PersistenceSystem(world, bus, save_path) if save_path is not None else None
    return TurnSystem(world, bus, movement, persistence)


def _position(world, entity):
    return world.component_for_entity(entity, GridPosition).as_tuple()


def test_all_enemies_dead_is_victory():
    world, bus = make_world()
    add_character(world, "Hero", 1, 1, player=True)
    add_character(world, "Enemy#1", 0, 0, health=0)
    add_character(world, "Enemy#2", 2, 2, health=-3)
    over = {}
    bus.subscribe(EVENT_GAME_OVER, lambda sender, **payload: over.update(payload))
    turns = _turns(world, bus)

    result = turns.submit("up")

    assert result.ok
    assert result.direction is Direction.UP
    assert result.phase is GamePhase.VICTORY
    assert turns.phase is GamePhase.VICTORY
    assert over == {"phase": GamePhase.VICTORY, "turn": 1}


def test_player_killed_mid_pass_is_defeat_even_with_enemies_alive():
    world, bus = make_world()
    hero = add_character(world, "Hero", 0, 0, health=10, armor=0, player=True)
    add_character(world, "Enemy#1", 1, 0, damage=20)
    add_character(world, "Enemy#2", 2, 2)
    turns = _turns(world, bus, ScriptedRandom([Direction.LEFT, Direction.UP]))

    result = turns.submit("up")

    assert result.phase is GamePhase.DEFEAT
    stats = world.component_for_entity(hero, CombatStats)
    assert stats.health == -10
    assert stats.is_dead


def test_defeat_takes_precedence_over_victory():
    world, bus = make_world()
    add_character(world, "Hero", 0, 0, health=0, player=True)
    add_character(world, "Enemy#1", 2, 2, health=0)

    assert _turns(world, bus).evaluate_outcome() is GamePhase.DEFEAT


def test_live_enemies_keep_the_game_going():
    world, bus = make_world()
    hero = add_character(world, "Hero", 0, 0, player=True)
    add_character(world, "Enemy#1", 2, 2)
    resolved = {}
    bus.subscribe(EVENT_TURN_RESOLVED, lambda sender, **payload: resolved.update(payload))
    turns = _turns(world, bus, ScriptedRandom([Direction.DOWN]))

    result = turns.submit("right")

    assert result.phase is GamePhase.AWAITING_COMMAND
    assert _position(world, hero) == (1, 0)
    assert turns.state.turn == 1
    assert resolved == {"turn": 1, "phase": GamePhase.AWAITING_COMMAND}


def test_roster_with_no_enemies_is_won_after_first_turn():
    world, bus = make_world()
    add_character(world, "Hero", 0, 0, player=True)

    assert _turns(world, bus).submit("down").phase is GamePhase.VICTORY


def test_earlier_roster_member_vacates_cell_for_later_one():
    world, bus = make_world()
    add_character(world, "Enemy#1", 1, 0)
    hero = add_character(world, "Hero", 0, 0, player=True)
    add_character(world, "Enemy#2", 2, 2)
    turns = _turns(world, bus, ScriptedRandom([Direction.DOWN, Direction.UP]))

    turns.submit("right")

    assert _position(world, hero) == (1, 0)


def test_exit_quits_without_outcome():
    world, bus = make_world()
    add_character(world, "Hero", 0, 0, player=True)
    add_character(world, "Enemy#1", 2, 2)
    changes = []
    bus.subscribe(EVENT_GAME_PHASE_CHANGED, lambda sender, **payload: changes.append(payload["new_phase"]))
    turns = _turns(world, bus)

    result = turns.submit("exit")

    assert result.phase is GamePhase.QUIT
    assert turns.state.turn == 0
    assert changes == [GamePhase.QUIT]


def test_unknown_command_is_rejected_without_consuming_a_turn():
    world, bus = make_world()
    hero = add_character(world, "Hero", 0, 0, player=True)
    add_character(world, "Enemy#1", 2, 2)
    rejected = []
    bus.subscribe(EVENT_COMMAND_REJECTED, lambda sender, **payload: rejected.append(payload))
    turns = _turns(world, bus)

    for token in ("Up", "RIGHT", "jump", "", " left"):
        result = turns.submit(token)
        assert result.error is ErrorKind.INVALID_COMMAND
        assert result.phase is GamePhase.AWAITING_COMMAND

    assert turns.state.turn == 0
    assert _position(world, hero) == (0, 0)
    assert [entry["token"] for entry in rejected] == ["Up", "RIGHT", "jump", "", " left"]


def test_commands_after_game_over_are_rejected():
    world, bus = make_world()
    add_character(world, "Hero", 0, 0, player=True)
    turns = _turns(world, bus)
    turns.submit("exit")

    result = turns.submit("up")

    assert result.error is ErrorKind.GAME_OVER
    assert result.phase is GamePhase.QUIT


def test_save_and_load_do_not_advance_the_turn(tmp_path):
    world, bus = make_world()
    hero = add_character(world, "Hero", 0, 0, player=True)
    add_character(world, "Enemy#1", 2, 2)
    turns = _turns(world, bus, ScriptedRandom([Direction.UP]), save_path=tmp_path / "save.bin")

    saved = turns.submit("save")
    assert saved.ok
    assert saved.phase is GamePhase.AWAITING_COMMAND
    assert turns.state.turn == 0

    turns.submit("down")
    assert _position(world, hero) == (0, 1)

    loaded = turns.submit("load")
    assert loaded.ok
    assert loaded.phase is GamePhase.AWAITING_COMMAND
    assert turns.state.turn == 1
    snapshot = turns.persistence.snapshot()
    assert [(record.name, record.x, record.y) for record in snapshot] == [
        ("Hero", 0, 0),
        ("Enemy#1", 2, 2),
    ]


def test_load_failure_is_reported_not_raised(tmp_path):
    world, bus = make_world()
    add_character(world, "Hero", 0, 0, player=True)
    turns = _turns(world, bus, save_path=tmp_path / "missing.bin")

    result = turns.submit("load")

    assert result.error is ErrorKind.LOAD_FAILED
    assert result.phase is GamePhase.AWAITING_COMMAND


def test_save_and_load_without_persistence_are_rejected():
    world, bus = make_world()
    add_character(world, "Hero", 0, 0, player=True)
    turns = _turns(world, bus)

    assert turns.submit("save").error is ErrorKind.INVALID_COMMAND
    assert turns.submit("load").error is ErrorKind.INVALID_COMMAND


def test_resolving_after_the_game_ended_changes_nothing():
    world, bus = make_world()
    hero = add_character(world, "Hero", 0, 0, player=True)
    add_character(world, "Enemy#1", 2, 2, health=0)
    turns = _turns(world, bus)
    assert turns.submit("down").phase is GamePhase.VICTORY
    resolved = []
    bus.subscribe(EVENT_TURN_RESOLVED, lambda sender, **payload: resolved.append(payload))

    phase = turns.resolve(Direction.DOWN)

    assert phase is GamePhase.VICTORY
    assert turns.state.turn == 1
    assert _position(world, hero) == (0, 1)
    assert resolved == []
