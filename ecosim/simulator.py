"""
Simulation engine for the ecosystem
Handles the step loop: double-buffered field update, day/night and weather
cycles, viability checks and statistics.
"""

import time as clock
from typing import Dict, List

from ecosim.config import SimulationConfig
from ecosim.core import randomizer
from ecosim.core.animal import create_animal
from ecosim.core.conditions import Time, Weather
from ecosim.core.field import Field
from ecosim.core.field_stats import FieldStats
from ecosim.core.location import Location
from ecosim.core.plant import create_plant
from ecosim.core.species import PlantSpecies, Species, creation_order


class Simulator:
    """
    A predator-prey simulator on a rectangular field of animals and plants.

    The view, if given, is any object with show_status(step, time, field, weather);
    it may also expose `paused` and `restart_requested` flags.
    """

    def __init__(self, depth: int = None, width: int = None, view=None,
                 verbose: bool = True, populate: bool = True) -> None:
        if depth is None:
            depth = SimulationConfig.DEFAULT_DEPTH
        if width is None:
            width = SimulationConfig.DEFAULT_WIDTH
        if width <= 0 or depth <= 0:
            print("The dimensions must be greater than zero.")
            print("Using default values.")
            depth = SimulationConfig.DEFAULT_DEPTH
            width = SimulationConfig.DEFAULT_WIDTH

        self.field = Field(depth, width)
        self.view = view
        self.verbose = verbose
        self.stats = FieldStats()
        self.step = 0
        self.time = Time.DAY
        self.weather = Weather.CLEAR
        self.history: List[Dict] = []

        self.reset(populate=populate)

    # ------------------------------------------------------------------
    # Run control
    # ------------------------------------------------------------------

    def run_long_simulation(self) -> Dict:
        """Run from the current state for a reasonably long period."""
        return self.simulate(SimulationConfig.LONG_RUN_STEPS)

    def simulate(self, num_steps: int) -> Dict:
        """
        Run for the given number of steps, stopping early once the field
        is no longer viable.

        Returns:
            Dictionary of run statistics (see summary())
        """
        start_time = clock.time()
        steps_run = 0
        self.report_stats()

        n = 1
        while n <= num_steps and self.field.is_viable():
            if self._restart_requested():
                print("\n⟳ Restart requested by user")
                self.view.restart_requested = False
                self.reset()
                n = 1
                steps_run = 0
                start_time = clock.time()
                continue

            # Handle pause
            if getattr(self.view, "paused", False):
                self._wait(0.1)
                continue

            self.simulate_one_step()
            steps_run += 1
            n += 1
            if self.view is not None:
                self._wait(SimulationConfig.STEP_DELAY)

        return self.summary(steps_run, clock.time() - start_time)

    def simulate_one_step(self) -> None:
        """
        Advance the whole field by one step.

        Every live entity of the current field acts against an empty next
        field; the next field then replaces the current one.
        """
        self.step += 1
        next_field = Field(self.field.depth, self.field.width)

        for animal in self.field.animals:
            if animal.is_alive():
                animal.act(self.field, next_field, self.time, self.weather)

        for plant in self.field.plants:
            if plant.is_alive():
                plant.act(self.field, next_field, self.time)

        # Prey caught after they had already moved are still in next_field
        next_field.remove_dead()

        # Replace the old state with the new one
        self.field = next_field

        self.change_time()
        self.change_weather()

        self.report_stats()
        if self.view is not None:
            self.view.show_status(self.step, self.time, self.field, self.weather)

    def reset(self, populate: bool = True) -> None:
        """Reset the simulation to a starting position."""
        self.step = 0
        self.time = Time.DAY
        self.weather = Weather.CLEAR
        self.history = []
        self.field.clear()
        if populate:
            self.populate()
        self._record()
        if self.view is not None:
            reset_view = getattr(self.view, "reset", None)
            if reset_view is not None:
                reset_view()
            self.view.show_status(self.step, self.time, self.field, self.weather)

    def attach_view(self, view) -> None:
        """Attach a view after construction and show the current state."""
        self.view = view
        if view is not None:
            view.show_status(self.step, self.time, self.field, self.weather)

    def populate(self) -> None:
        """
        Randomly populate the field with prey, predators and plants.
        Each cell gets at most one organism: the first kind whose
        probability check passes.
        """
        self.field.clear()
        order = creation_order()
        for row in range(self.field.depth):
            for col in range(self.field.width):
                for kind, probability in order:
                    if randomizer.uniform_double() <= probability:
                        self._spawn(kind, Location(row, col))
                        break
                # else leave the location empty

    def _spawn(self, kind, location: Location) -> None:
        if isinstance(kind, Species):
            self.field.place_animal(create_animal(kind, location, random_age=True), location)
        elif isinstance(kind, PlantSpecies):
            self.field.place_plant(create_plant(kind, location), location)

    # ------------------------------------------------------------------
    # Cycles
    # ------------------------------------------------------------------

    def change_time(self) -> None:
        """Flip day/night every DAY_STEPS steps."""
        if self.step % SimulationConfig.DAY_STEPS == 0:
            self.time = self.time.flipped()

    def change_weather(self) -> None:
        """Redraw the weather every WEATHER_STEPS steps."""
        if self.step % SimulationConfig.WEATHER_STEPS == 0:
            self.weather = Weather.random_weather()

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def get_population_details(self) -> str:
        self.stats.reset()
        return self.stats.get_population_details(self.field)

    def report_stats(self) -> str:
        """Record this step's counts and print the one-line report."""
        line = self.get_population_details()
        if not self.history or self.history[-1]["step"] != self.step:
            self._record()
        if self.verbose:
            print(f"Step: {self.step} {line}")
        return line

    def _record(self) -> Dict:
        self.stats.reset()
        entry = {
            "step": self.step,
            "time": self.time,
            "weather": self.weather,
            "counts": self.stats.get_counts(self.field),
            "infected": self.field.infected_count(),
            "leaves": self.field.edible_plant_count(),
        }
        self.history.append(entry)
        return entry

    def summary(self, steps_run: int = None, duration: float = 0.0) -> Dict:
        """
        Aggregate the recorded history.

        Returns:
            dict with total_steps, duration, viable, final/peak counts per
            species, final infected and leaves
        """
        final = self.history[-1] if self.history else self._record()
        peaks = {}
        for entry in self.history:
            for species, count in entry["counts"].items():
                peaks[species] = max(peaks.get(species, 0), count)
        return {
            "total_steps": self.step if steps_run is None else steps_run,
            "duration": duration,
            "viable": self.field.is_viable(),
            "final_counts": dict(final["counts"]),
            "peak_counts": peaks,
            "final_infected": final["infected"],
            "final_leaves": final["leaves"],
        }

    # ------------------------------------------------------------------
    # View helpers
    # ------------------------------------------------------------------

    def _restart_requested(self) -> bool:
        return bool(getattr(self.view, "restart_requested", False))

    def _wait(self, seconds: float) -> None:
        pause = getattr(self.view, "pause", None)
        if pause is not None:
            pause(seconds)
        elif seconds > 0:
            clock.sleep(seconds)
