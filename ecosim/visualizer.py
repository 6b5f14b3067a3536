"""
Field visualizer for the ecosystem simulation
Renders the grid as an RGB image plus a population chart, with Pause/Restart
controls. Only reads from the field.
"""

from typing import Dict, List, Tuple

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from matplotlib.widgets import Button
import numpy as np

from ecosim.core.location import Location
from ecosim.core.plant import LeafCell
from ecosim.core.species import PLANT_PARAMS, SPECIES_PARAMS, PlantSpecies, Species

EMPTY_COLOR = (255, 255, 255)  # white
UNKNOWN_COLOR = (128, 128, 128)  # gray
DARKER_FACTOR = 0.7  # infected animals are drawn darker


def organism_color(organism) -> Tuple[int, int, int]:
    """Display colour keyed by concrete species; leaves use their parent's colour."""
    if organism is None:
        return EMPTY_COLOR
    if isinstance(organism, LeafCell):
        return PLANT_PARAMS[organism.parent_species].color
    species = getattr(organism, "species", None)
    if isinstance(species, Species):
        return SPECIES_PARAMS[species].color
    if isinstance(species, PlantSpecies):
        return PLANT_PARAMS[species].color
    return UNKNOWN_COLOR


def darker(color: Tuple[int, int, int]) -> Tuple[int, int, int]:
    return tuple(int(c * DARKER_FACTOR) for c in color)


def build_frame(field) -> np.ndarray:
    """
    Build a (depth, width, 3) uint8 image of the field.
    Animals are drawn over plants; infected animals are darkened.
    """
    frame = np.empty((field.depth, field.width, 3), dtype=np.uint8)
    frame[:, :] = EMPTY_COLOR
    for row in range(field.depth):
        for col in range(field.width):
            loc = Location(row, col)
            animal = field.get_animal_at(loc)
            if animal is not None and animal.is_alive():
                color = organism_color(animal)
                frame[row, col] = darker(color) if animal.infected else color
                continue
            plant = field.get_plant_at(loc)
            if plant is not None:
                frame[row, col] = organism_color(plant)
    return frame


class FieldVisualizer:
    """Game field display with population history and controls"""

    def __init__(self, depth: int, width: int, interactive: bool = True):
        self.depth = depth
        self.width = width
        self.interactive = interactive

        self.fig = plt.figure(figsize=(14, 8))
        self.fig.suptitle('Ecosystem Simulation', fontsize=14, fontweight='bold')

        gs = self.fig.add_gridspec(2, 3, hspace=0.3, wspace=0.3,
                                   left=0.05, right=0.95, top=0.90, bottom=0.10)

        # Main field (left side) - spans both rows, 2 columns
        self.ax_main = self.fig.add_subplot(gs[:, :2])
        self.ax_main.set_xticks([])
        self.ax_main.set_yticks([])
        self.image = self.ax_main.imshow(
            np.full((depth, width, 3), EMPTY_COLOR, dtype=np.uint8),
            interpolation='nearest')

        # Population graph (top right)
        self.ax_pop = self.fig.add_subplot(gs[0, 2])

        # Legend panel (bottom right)
        self.ax_legend = self.fig.add_subplot(gs[1, 2])
        self.ax_legend.axis('off')

        # Data for population tracking
        self.step_history: List[int] = []
        self.population_history: Dict[Species, List[int]] = {s: [] for s in Species}

        # Simulation control state
        self.paused = False
        self.restart_requested = False

        self._create_legend()
        self._create_buttons()

        if self.interactive:
            plt.ion()  # Interactive mode
            plt.show()

    def _create_legend(self):
        """Create visual legend for species colours"""
        legend_elements = [
            mpatches.Patch(facecolor=np.array(SPECIES_PARAMS[s].color) / 255.0,
                           edgecolor='black', label=str(s))
            for s in Species
        ] + [
            mpatches.Patch(facecolor=np.array(PLANT_PARAMS[p].color) / 255.0,
                           edgecolor='black', label=str(p))
            for p in PlantSpecies
        ]
        self.ax_legend.legend(handles=legend_elements, loc='center',
                              frameon=True, fontsize=8, ncol=1)
        self.ax_legend.set_title('Legend (infected drawn darker)', fontsize=8,
                                 fontweight='bold', loc='center', pad=2)

    def _create_buttons(self):
        """Create interactive control buttons"""
        ax_pause = self.fig.add_axes([0.30, 0.015, 0.10, 0.04])
        self.btn_pause = Button(ax_pause, 'Pause', color='lightblue', hovercolor='skyblue')
        self.btn_pause.on_clicked(self._toggle_pause)

        ax_restart = self.fig.add_axes([0.44, 0.015, 0.10, 0.04])
        self.btn_restart = Button(ax_restart, 'Restart', color='lightcoral', hovercolor='salmon')
        self.btn_restart.on_clicked(self._request_restart)

    def _toggle_pause(self, event):
        """Toggle simulation pause state"""
        self.paused = not self.paused
        self.btn_pause.label.set_text('Resume' if self.paused else 'Pause')
        self.fig.canvas.draw_idle()

    def _request_restart(self, event):
        self.restart_requested = True

    def reset(self):
        """Forget the population history (a new run is starting)."""
        self.step_history = []
        self.population_history = {s: [] for s in Species}

    def show_status(self, step: int, time, field, weather) -> None:
        """Draw one frame for the given step."""
        counts = field.field_stats()
        self.step_history.append(step)
        for species in Species:
            self.population_history[species].append(counts.get(species, 0))

        self.image.set_data(build_frame(field))
        population = " ".join(f"{s}: {c}" for s, c in counts.items())
        self.ax_main.set_title(
            f'Step: {step}  Time: {time}  Weather: {weather}\nPopulation: {population}',
            fontsize=9)

        self._update_population_chart()

        if self.interactive:
            self.pause(0.0001)
        else:
            self.fig.canvas.draw_idle()

    def _update_population_chart(self):
        self.ax_pop.clear()
        self.ax_pop.set_title('Population Over Time', fontsize=9, fontweight='bold', pad=3)
        self.ax_pop.set_xlabel('Step', fontsize=7)
        self.ax_pop.set_ylabel('Count', fontsize=7)
        self.ax_pop.tick_params(labelsize=6)
        self.ax_pop.grid(True, alpha=0.3)
        if len(self.step_history) > 1:
            for species in Species:
                self.ax_pop.plot(self.step_history, self.population_history[species],
                                 color=np.array(SPECIES_PARAMS[species].color) / 255.0,
                                 linewidth=1.5, label=str(species))
            self.ax_pop.legend(loc='upper right', fontsize=6)

    def pause(self, seconds: float) -> None:
        """Let the GUI event loop run (used by the simulator between steps)."""
        if self.interactive:
            plt.pause(max(seconds, 0.0001))

    def close(self) -> None:
        plt.close(self.fig)
