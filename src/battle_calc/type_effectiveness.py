from typing import Optional

from src.battle_calc.enums import Generation, Type
from src.battle_calc.schema.effectiveness import DefensiveEffectivenesses

T = Type

# Modern (gen 6+) chart: attacking type -> (double, half, immune) defending types
TYPE_CHART: dict[Type, tuple[tuple[Type, ...], tuple[Type, ...], tuple[Type, ...]]] = {
    T.NORMAL: ((), (T.ROCK, T.STEEL), (T.GHOST,)),
    T.FIGHTING: (
        (T.NORMAL, T.ROCK, T.STEEL, T.ICE, T.DARK),
        (T.FLYING, T.POISON, T.BUG, T.PSYCHIC, T.FAIRY),
        (T.GHOST,),
    ),
    T.FLYING: ((T.FIGHTING, T.BUG, T.GRASS), (T.ROCK, T.STEEL, T.ELECTRIC), ()),
    T.POISON: ((T.GRASS, T.FAIRY), (T.POISON, T.GROUND, T.ROCK, T.GHOST), (T.STEEL,)),
    T.GROUND: ((T.POISON, T.ROCK, T.STEEL, T.FIRE, T.ELECTRIC), (T.BUG, T.GRASS), (T.FLYING,)),
    T.ROCK: ((T.FLYING, T.BUG, T.FIRE, T.ICE), (T.FIGHTING, T.GROUND, T.STEEL), ()),
    T.BUG: ((T.GRASS, T.PSYCHIC, T.DARK), (T.FIGHTING, T.FLYING, T.POISON, T.GHOST, T.STEEL, T.FIRE), ()),
    T.GHOST: ((T.GHOST, T.PSYCHIC), (T.DARK,), (T.NORMAL,)),
    T.STEEL: ((T.ROCK, T.ICE, T.FAIRY), (T.STEEL, T.FIRE, T.WATER, T.ELECTRIC), ()),
    T.FIRE: ((T.BUG, T.STEEL, T.GRASS), (T.ROCK, T.FIRE, T.WATER, T.DRAGON), ()),
    T.WATER: ((T.GROUND, T.ROCK, T.FIRE), (T.WATER, T.GRASS, T.DRAGON), ()),
    T.GRASS: ((T.GROUND, T.ROCK, T.WATER), (T.FLYING, T.POISON, T.BUG, T.STEEL, T.FIRE, T.GRASS, T.DRAGON), ()),
    T.ELECTRIC: ((T.FLYING, T.WATER), (T.GRASS, T.ELECTRIC, T.DRAGON), (T.GROUND,)),
    T.PSYCHIC: ((T.FIGHTING, T.POISON), (T.STEEL, T.PSYCHIC), (T.DARK,)),
    T.ICE: ((T.FLYING, T.GROUND, T.GRASS, T.DRAGON), (T.STEEL, T.FIRE, T.WATER, T.ICE), ()),
    T.DRAGON: ((T.DRAGON,), (T.STEEL,), (T.FAIRY,)),
    T.DARK: ((T.GHOST, T.PSYCHIC), (T.FIGHTING, T.DARK, T.FAIRY), ()),
    T.FAIRY: ((T.FIGHTING, T.DRAGON, T.DARK), (T.POISON, T.STEEL, T.FIRE), ()),
}

# Steel resisted Ghost and Dark until gen 6
STEEL_RESISTS_GHOST_AND_DARK = {
    Generation.GEN_1,
    Generation.GEN_2,
    Generation.GEN_3,
    Generation.GEN_4,
    Generation.GEN_5,
}

MULTIPLIERS = (("x4", 4), ("x2", 2), ("x0", 0), ("half", 0.5), ("fourth", 0.25))


def _move_to(chart: dict[str, list[Type]], attacking_type: Type, location: Optional[str]) -> None:
    for types in chart.values():
        if attacking_type in types:
            types.remove(attacking_type)
    if location is not None:
        chart[location].append(attacking_type)


class TypeEffectiveness:
    """
    Type chart lookups for every generation.

    The chart above is the current one; older generations patch individual
    entries on top of it.
    """

    @staticmethod
    def get_defensive_effectivenesses(defending_type: Optional[Type], generation: Generation) -> DefensiveEffectivenesses:
        """
        Weaknesses, resistances and immunities of a single type.

        Attacking types are listed in chart order; entries changed by an older
        generation's chart come last.
        """
        if defending_type is None:
            return DefensiveEffectivenesses()

        chart = {
            "x4": [],
            "x2": [attacking for attacking, (double, _, _) in TYPE_CHART.items() if defending_type in double],
            "x0": [attacking for attacking, (_, _, immune) in TYPE_CHART.items() if defending_type in immune],
            "half": [attacking for attacking, (_, half, _) in TYPE_CHART.items() if defending_type in half],
            "fourth": [],
        }

        if generation in STEEL_RESISTS_GHOST_AND_DARK and defending_type == Type.STEEL:
            _move_to(chart, Type.GHOST, "half")
            _move_to(chart, Type.DARK, "half")

        if generation == Generation.GEN_1:
            if defending_type == Type.POISON:
                _move_to(chart, Type.BUG, "x2")
            if defending_type == Type.BUG:
                _move_to(chart, Type.POISON, "x2")
            if defending_type == Type.PSYCHIC:
                _move_to(chart, Type.GHOST, "x0")
            if defending_type == Type.FIRE:
                _move_to(chart, Type.ICE, None)

        return DefensiveEffectivenesses(**chart)

    @staticmethod
    def calculate_combined_defensive_effectivenesses(generation: Generation, *defending_types: Type) -> DefensiveEffectivenesses:
        """Effectivenesses against a Pokemon with one or two types"""
        first = TypeEffectiveness.get_defensive_effectivenesses(defending_types[0] if defending_types else None, generation)
        second = TypeEffectiveness.get_defensive_effectivenesses(defending_types[1] if len(defending_types) > 1 else None, generation)

        immunities = set(first.x0) | set(second.x0)

        result = DefensiveEffectivenesses()
        for attacking in Type:
            if attacking in immunities:
                result.x0.append(attacking)
                continue

            weak_count = (attacking in first.x2) + (attacking in second.x2)
            resist_count = (attacking in first.half) + (attacking in second.half)

            if weak_count == 2:
                result.x4.append(attacking)
            elif resist_count == 2:
                result.fourth.append(attacking)
            elif weak_count == 1 and resist_count == 0:
                result.x2.append(attacking)
            elif resist_count == 1 and weak_count == 0:
                result.half.append(attacking)

        return result

    @staticmethod
    def calculate_move_effectiveness(move_type: Type, generation: Generation, *defending_types: Type) -> float:
        """Damage multiplier of a move against the defender's types: 0, 0.25, 0.5, 1, 2 or 4"""
        combined = TypeEffectiveness.calculate_combined_defensive_effectivenesses(generation, *defending_types)

        for field, multiplier in MULTIPLIERS:
            if move_type in getattr(combined, field):
                return multiplier

        return 1
