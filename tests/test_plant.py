"""
Plant growth tests: phase changes, leaf spawning, regression and eating
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from ecosim.config import SimulationConfig
from ecosim.core.conditions import Time
from ecosim.core.field import Field
from ecosim.core.location import Location
from ecosim.core.plant import CorePlant, LeafCell, create_plant
from ecosim.core.species import PlantSpecies
from tests._helpers import place


def grow(plant, current, time=Time.DAY):
    """Run one plant act and return the next field."""
    nxt = Field(current.depth, current.width)
    plant.act(current, nxt, time)
    return nxt


def test_core_plant_is_always_carried_over():
    current = Field(3, 3)
    tree = place(current, create_plant(PlantSpecies.TREE, Location(1, 1)))
    nxt = grow(tree, current, Time.NIGHT)
    assert nxt.get_plant_at(Location(1, 1)) is tree
    assert tree.growth_state == 0
    print("✓ Core plant re-placed; no growth at night")


def test_phase_two_spawns_forward_block():
    current = Field(5, 5)
    tree = place(current, CorePlant(PlantSpecies.TREE, Location(2, 2)))
    tree.growth_state = SimulationConfig.PHASE_2_AGE - 1

    nxt = grow(tree, current)

    assert tree.phase == 2
    assert sorted(leaf.location for leaf in tree.leaf_cells) == [
        Location(2, 3), Location(3, 2), Location(3, 3)]
    assert nxt.edible_plant_count() == 3
    assert all(isinstance(nxt.get_plant_at(leaf.location), LeafCell) for leaf in tree.leaf_cells)
    print(f"✓ Phase 2 leaves: {[str(leaf.location) for leaf in tree.leaf_cells]}")


def test_phase_three_replaces_leaves_with_full_ring():
    current = Field(5, 5)
    tree = place(current, CorePlant(PlantSpecies.TREE, Location(2, 2)))
    tree.growth_state = SimulationConfig.PHASE_2_AGE - 1
    current = grow(tree, current)
    old_leaves = list(tree.leaf_cells)

    tree.growth_state = SimulationConfig.PHASE_3_AGE - 1
    nxt = Field(5, 5)
    # Old leaves act after the core in this ordering
    tree.act(current, nxt, Time.DAY)
    for leaf in old_leaves:
        leaf.act(current, nxt, Time.DAY)
    nxt.remove_dead()

    assert tree.phase == 3
    assert len(tree.leaf_cells) == 8
    assert all(not leaf.is_alive() for leaf in old_leaves)
    assert nxt.edible_plant_count() == 8
    assert nxt.get_plant_at(Location(2, 2)) is tree
    print("✓ Phase 3 ring of 8 leaves")


def test_leaves_clipped_at_field_edge():
    current = Field(3, 3)
    tree = place(current, CorePlant(PlantSpecies.TREE, Location(0, 0)))
    tree.growth_state = SimulationConfig.PHASE_3_AGE - 1
    tree.phase = 2
    tree.leaf_cells = [LeafCell(Location(0, 1), tree)]
    grow(tree, current)
    assert tree.phase == 3
    assert len(tree.leaf_cells) == 3


def test_berry_shrub_stops_at_phase_two():
    current = Field(5, 5)
    shrub = place(current, CorePlant(PlantSpecies.BERRY_SHRUB, Location(2, 2)))
    shrub.growth_state = SimulationConfig.PHASE_2_AGE - 1
    current = grow(shrub, current)
    assert shrub.phase == 2

    shrub.growth_state = SimulationConfig.PHASE_3_AGE - 1
    grow(shrub, current)
    assert shrub.phase == 2
    assert len(shrub.leaf_cells) == 3
    print("✓ Berry shrub max phase is 2")


def test_phase_only_changes_at_threshold_on_day():
    current = Field(5, 5)
    tree = place(current, CorePlant(PlantSpecies.TREE, Location(2, 2)))
    phases = []
    for step in range(SimulationConfig.PHASE_3_AGE + 5):
        time = Time.DAY if step % 2 == 0 else Time.NIGHT
        current = grow(tree, current, time)
        phases.append(tree.phase)
    assert phases == sorted(phases)
    assert tree.growth_state == (SimulationConfig.PHASE_3_AGE + 5 + 1) // 2
    assert tree.phase == 2


def test_plant_resets_when_all_leaves_eaten():
    current = Field(5, 5)
    tree = place(current, CorePlant(PlantSpecies.TREE, Location(2, 2)))
    tree.growth_state = SimulationConfig.PHASE_2_AGE - 1
    current = grow(tree, current)
    for leaf in list(tree.leaf_cells):
        leaf.remove_leaf()
    assert tree.leaf_cells == []

    grow(tree, current)
    assert tree.phase == 1
    assert tree.growth_state == 1
    print("✓ Eaten-out plant starts over")


def test_removed_leaf_leaves_parent_and_field():
    field = Field(3, 3)
    shrub = place(field, CorePlant(PlantSpecies.BERRY_SHRUB, Location(1, 1)))
    leaf = shrub.add_leaf_cell(Location(1, 2), field)
    assert field.edible_plant_count() == 1

    leaf.remove_leaf()
    assert not leaf.is_alive()
    assert leaf.location is None
    assert leaf not in shrub.leaf_cells
    assert field.edible_plant_count() == 0

    field.remove_dead()
    assert field.get_plant_at(Location(1, 2)) is None
    assert leaf not in field.plants


def test_dead_leaf_is_not_carried_over():
    current = Field(3, 3)
    shrub = CorePlant(PlantSpecies.BERRY_SHRUB, Location(1, 1))
    leaf = shrub.add_leaf_cell(Location(0, 0), current)
    leaf.remove_leaf()
    nxt = Field(3, 3)
    leaf.act(current, nxt, Time.DAY)
    assert nxt.plants == []


if __name__ == "__main__":
    test_core_plant_is_always_carried_over()
    test_phase_two_spawns_forward_block()
    test_phase_three_replaces_leaves_with_full_ring()
    test_leaves_clipped_at_field_edge()
    test_berry_shrub_stops_at_phase_two()
    test_phase_only_changes_at_threshold_on_day()
    test_plant_resets_when_all_leaves_eaten()
    test_removed_leaf_leaves_parent_and_field()
    test_dead_leaf_is_not_carried_over()
    print("\n✓ All plant tests passed")
