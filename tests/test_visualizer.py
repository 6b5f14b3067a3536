"""
Visualizer tests (headless, Agg backend)
"""
import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from ecosim.core.conditions import Time, Weather
from ecosim.core.field import Field
from ecosim.core.location import Location
from ecosim.core.plant import CorePlant
from ecosim.core.species import PLANT_PARAMS, SPECIES_PARAMS, PlantSpecies, Species
from ecosim.visualizer import EMPTY_COLOR, FieldVisualizer, build_frame, darker
from tests._helpers import make_animal, place


def test_build_frame_colours():
    field = Field(2, 3)
    place(field, make_animal(Species.LION, 0, 0))
    place(field, make_animal(Species.ARMADILLO, 0, 1, infected=True))
    tree = place(field, CorePlant(PlantSpecies.TREE, Location(1, 0)))
    tree.add_leaf_cell(Location(1, 1), field)
    # Animal drawn over the plant beneath it
    place(field, CorePlant(PlantSpecies.BERRY_SHRUB, Location(0, 0)))

    frame = build_frame(field)

    assert frame.shape == (2, 3, 3)
    assert frame.dtype == np.uint8
    assert tuple(frame[0, 0]) == SPECIES_PARAMS[Species.LION].color
    assert tuple(frame[0, 1]) == darker(SPECIES_PARAMS[Species.ARMADILLO].color)
    assert tuple(frame[1, 0]) == PLANT_PARAMS[PlantSpecies.TREE].color
    assert tuple(frame[1, 1]) == PLANT_PARAMS[PlantSpecies.TREE].color
    assert tuple(frame[0, 2]) == EMPTY_COLOR
    print("✓ Frame colours match species")


def test_build_frame_skips_dead_animals():
    field = Field(1, 1)
    animal = place(field, make_animal(Species.GIRAFFE, 0, 0))
    animal.set_dead()
    assert tuple(build_frame(field)[0, 0]) == EMPTY_COLOR


def test_visualizer_tracks_population():
    field = Field(4, 4)
    place(field, make_animal(Species.SNAKE, 0, 0))
    place(field, make_animal(Species.ARMADILLO, 1, 1))

    viz = FieldVisualizer(4, 4, interactive=False)
    try:
        viz.show_status(0, Time.DAY, field, Weather.CLEAR)
        viz.show_status(1, Time.DAY, field, Weather.RAIN)
        assert viz.step_history == [0, 1]
        assert viz.population_history[Species.SNAKE] == [1, 1]
        assert viz.population_history[Species.LION] == [0, 0]
        assert "Weather: rain" in viz.ax_main.get_title()

        viz.reset()
        assert viz.step_history == []
    finally:
        viz.close()
    print("✓ Visualizer history updates")


def test_pause_and_restart_controls():
    viz = FieldVisualizer(3, 3, interactive=False)
    try:
        viz._toggle_pause(None)
        assert viz.paused is True
        assert viz.btn_pause.label.get_text() == 'Resume'
        viz._toggle_pause(None)
        assert viz.paused is False

        viz._request_restart(None)
        assert viz.restart_requested is True
    finally:
        viz.close()


if __name__ == "__main__":
    test_build_frame_colours()
    test_build_frame_skips_dead_animals()
    test_visualizer_tracks_population()
    test_pause_and_restart_controls()
    print("\n✓ All visualizer tests passed")
