from __future__ import annotations

from dataclasses import dataclass

from esper import World

from skirmish.components.combat_stats import CombatStats
from skirmish.events.bus import EventBus, EVENT_ATTACK_RESOLVED, EVENT_CHARACTER_DIED
from skirmish.utils.world_queries import character_name


@dataclass(slots=True)
class AttackResult:
    damage: int
    armor: int
    health: int
    killed: bool


class CombatSystem:
    """Resolves a single attack between two characters.

    Damage wears armor down first. Whatever drives armor to zero or below
    overflows 1:1 into health and armor is clamped back to zero. This is the
    only place health changes, so the death check lives here too.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus

    def attack(self, attacker: int, target: int) -> AttackResult:
        attacker_stats = self.world.component_for_entity(attacker, CombatStats)
        target_stats = self.world.component_for_entity(target, CombatStats)
        was_dead = target_stats.is_dead

        target_stats.armor -= attacker_stats.damage
        if target_stats.armor <= 0:
            target_stats.health += target_stats.armor
            target_stats.armor = 0

        killed = target_stats.is_dead and not was_dead
        result = AttackResult(
            damage=attacker_stats.damage,
            armor=target_stats.armor,
            health=target_stats.health,
            killed=killed,
        )
        target_name = character_name(self.world, target)
        self.event_bus.emit(
            EVENT_ATTACK_RESOLVED,
            attacker=attacker,
            target=target,
            attacker_name=character_name(self.world, attacker),
            target_name=target_name,
            damage=result.damage,
            armor=result.armor,
            health=result.health,
            killed=killed,
        )
        if killed:
            self.event_bus.emit(
                EVENT_CHARACTER_DIED,
                entity=target,
                name=target_name,
                source=attacker,
            )
        return result
