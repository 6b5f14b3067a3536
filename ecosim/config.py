"""
Configuration settings for the ecosystem simulation

This file contains all tunable parameters for the grid ecosystem: field size,
population seeding, day/night and weather cycles, infection, and plant growth.
Per-species constants (breeding age, max age, litter size, hunt timing) live in
ecosim.core.species.
"""


class SimulationConfig:
    """Configuration class for all simulation parameters"""

    # Store base config values (restored by restore_base/apply_overrides)
    _BASE = {}  # Will be populated after class definition

    # ============================================================================
    # GRID SETTINGS
    # ============================================================================
    DEFAULT_DEPTH = 100  # Rows used when the requested depth is invalid
    DEFAULT_WIDTH = 150  # Columns used when the requested width is invalid

    # ============================================================================
    # POPULATION SEEDING (per cell, first match in this order wins)
    # ============================================================================
    GIRAFFE_CREATION_PROBABILITY = 0.03
    LION_CREATION_PROBABILITY = 0.02
    SNAKE_CREATION_PROBABILITY = 0.03
    OCELOT_CREATION_PROBABILITY = 0.03
    ARMADILLO_CREATION_PROBABILITY = 0.08
    BERRY_SHRUB_CREATION_PROBABILITY = 0.02
    TREE_CREATION_PROBABILITY = 0.02

    # ============================================================================
    # CYCLES
    # ============================================================================
    DAY_STEPS = 5  # Steps between day/night flips
    WEATHER_STEPS = 10  # Steps between weather redraws
    LONG_RUN_STEPS = 700  # Length of run_long_simulation()

    # ============================================================================
    # INFECTION
    # ============================================================================
    INFECTION_PROBABILITY = 0.005  # Chance a newly created animal starts infected
    INFECTION_DEATH_PROBABILITY = 0.5  # Chance per act that an infected animal dies

    # ============================================================================
    # WEATHER GATE (probability an animal acts under each weather)
    # ============================================================================
    RAIN_ACT_PROBABILITY = 0.6
    CLOUDY_ACT_PROBABILITY = 0.8
    STORM_ACT_PROBABILITY = 0.4
    # CLEAR always acts

    # ============================================================================
    # HUNGER
    # ============================================================================
    PREY_FULL_STEPS = 10  # Steps a prey stays full after eating
    PREY_HUNGRY_STEPS = 20  # Steps a hungry prey survives without food
    PREDATOR_FULL_STEPS = 5  # Steps a predator stays full after eating
    # Predator hungry duration is drawn per individual from [0, bound),
    # the bound depending on what the predator hunts
    PREDATOR_HUNGRY_BOUND_ARMADILLO = 10
    PREDATOR_HUNGRY_BOUND_GIRAFFE = 50

    # ============================================================================
    # PLANT GROWTH
    # ============================================================================
    PHASE_2_AGE = 25  # Growth state at which a core plant spawns its 2x2 leaves
    PHASE_3_AGE = 50  # Growth state at which a core plant spawns its 3x3 leaves

    # ============================================================================
    # RUN CONTROL
    # ============================================================================
    STEP_DELAY = 0.05  # Seconds to pause between steps while a view is attached

    @classmethod
    def restore_base(cls):
        """Reset every upper-case setting to its value at import time."""
        for k, v in cls._BASE.items():
            setattr(cls, k, v)

    @classmethod
    def apply_overrides(cls, overrides):
        """
        Apply a set of overrides on top of the base configuration.

        Args:
            overrides (dict): Setting name -> value. Unknown names are ignored.

        Returns:
            dict: The overrides that were actually applied
        """
        # Reset to base values first (prevents leakage between runs)
        cls.restore_base()

        applied = {}
        for key, value in (overrides or {}).items():
            if key in cls._BASE:
                setattr(cls, key, value)
                applied[key] = value
        return applied

    @classmethod
    def describe(cls, overrides=None):
        """
        Human-readable banner of the active settings that differ from base.

        Args:
            overrides (dict): Optional explicit set to report instead

        Returns:
            str: Formatted banner, or empty string if nothing differs
        """
        if overrides is None:
            overrides = {k: getattr(cls, k) for k, v in cls._BASE.items()
                         if getattr(cls, k) != v}
        if not overrides:
            return ""

        info = f"\n{'='*70}\n"
        info += "CONFIGURATION OVERRIDES\n"
        for key, value in overrides.items():
            info += f"  - {key}: {value}\n"
        info += f"{'='*70}\n"
        return info


# Populate _BASE with all uppercase class attributes (base config values)
SimulationConfig._BASE = {k: v for k, v in vars(SimulationConfig).items() if k.isupper() and not k.startswith("_")}
