"""
Configuration override tests
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from ecosim.config import SimulationConfig
from ecosim.core.species import PlantSpecies, Species, creation_order, predator_hungry_bound


def test_apply_overrides_sets_known_keys_only():
    applied = SimulationConfig.apply_overrides({'DAY_STEPS': 3, 'NOT_A_SETTING': 1,
                                                'step_delay': 9})
    assert applied == {'DAY_STEPS': 3}
    assert SimulationConfig.DAY_STEPS == 3
    assert not hasattr(SimulationConfig, 'NOT_A_SETTING')
    print(f"✓ Applied {applied}")


def test_overrides_do_not_stack():
    SimulationConfig.apply_overrides({'DAY_STEPS': 3})
    SimulationConfig.apply_overrides({'WEATHER_STEPS': 4})
    assert SimulationConfig.DAY_STEPS == 5
    assert SimulationConfig.WEATHER_STEPS == 4


def test_restore_base_is_repeatable():
    SimulationConfig.apply_overrides({'INFECTION_PROBABILITY': 1.0})
    SimulationConfig.restore_base()
    SimulationConfig.restore_base()
    assert SimulationConfig.INFECTION_PROBABILITY == 0.005
    assert SimulationConfig._BASE['INFECTION_PROBABILITY'] == 0.005
    assert '_BASE' not in SimulationConfig._BASE


def test_describe_lists_active_overrides():
    assert SimulationConfig.describe() == ""
    SimulationConfig.apply_overrides({'STEP_DELAY': 0.5})
    banner = SimulationConfig.describe()
    assert "CONFIGURATION OVERRIDES" in banner
    assert "STEP_DELAY: 0.5" in banner
    print(banner)


def test_creation_order_reads_current_config():
    kinds = [kind for kind, _ in creation_order()]
    assert kinds == [Species.GIRAFFE, Species.LION, Species.SNAKE, Species.OCELOT,
                     Species.ARMADILLO, PlantSpecies.BERRY_SHRUB, PlantSpecies.TREE]
    SimulationConfig.apply_overrides({'TREE_CREATION_PROBABILITY': 0.9})
    assert dict(creation_order())[PlantSpecies.TREE] == 0.9


def test_predator_hungry_bound_by_prey():
    assert predator_hungry_bound(Species.ARMADILLO) == 10
    assert predator_hungry_bound(Species.GIRAFFE) == 50
    try:
        predator_hungry_bound(Species.LION)
    except ValueError:
        pass
    else:
        raise AssertionError("lions are not hunted")


if __name__ == "__main__":
    test_apply_overrides_sets_known_keys_only()
    test_overrides_do_not_stack()
    test_restore_base_is_repeatable()
    test_describe_lists_active_overrides()
    test_creation_order_reads_current_config()
    test_predator_hungry_bound_by_prey()
    print("\n✓ All config tests passed")
