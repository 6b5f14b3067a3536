"""
Animal class hierarchy for the ecosystem simulation
Base Animal class with Prey and Predator subclasses for role-specific behavior.
Concrete species (Armadillo, Lion, ...) are a Species tag carrying a parameter
record, so one Prey class serves every prey species.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ecosim.config import SimulationConfig
from ecosim.core import randomizer
from ecosim.core.conditions import Time, Weather
from ecosim.core.location import Location
from ecosim.core.organism import Organism
from ecosim.core.plant import LeafCell
from ecosim.core.species import Role, Species, SpeciesParams, predator_hungry_bound


class Animal(Organism, ABC):
    """Abstract base class for all animals in the simulation"""

    def __init__(self, species: Species, location: Optional[Location],
                 random_age: bool = False) -> None:
        super().__init__(location)
        self.species = species
        self.params: SpeciesParams = species.params
        self.female = randomizer.random_bool()
        self.infected = randomizer.uniform_double() < SimulationConfig.INFECTION_PROBABILITY
        self.age = randomizer.uniform_int(self.params.max_age) if random_age else 0

    def __repr__(self) -> str:
        return (f"{self.species}{{age={self.age}, alive={self.alive}, "
                f"location={self.location}, infected={self.infected}}}")

    def is_predator(self) -> bool:
        return False

    # ------------------------------------------------------------------
    # Shared act skeleton
    # ------------------------------------------------------------------

    def act(self, current_field, next_field, time: Time, weather: Weather) -> None:
        """
        Advance this animal by one step.

        Reads food/prey from current_field; reads neighbours (mates, infection,
        free cells) from next_field and writes itself and any offspring there.
        A dead animal is never placed.
        """
        self.increment_age()
        self.increment_hunger()
        if not self.is_alive():
            return

        free_locations = next_field.get_free_adjacent_locations(self.location)

        # Contagion sees animals already placed earlier this step
        self.check_if_infected(next_field)
        if self.infected and randomizer.uniform_double() < SimulationConfig.INFECTION_DEATH_PROBABILITY:
            self.set_dead()
            return

        if not self.can_act(weather):
            # Sit the step out in place
            next_field.place_animal(self, self.location)
            return

        if free_locations:
            self.give_birth(next_field, free_locations)

        next_location = self.choose_next_location(current_field, free_locations, time)
        if next_location is not None and self.cell_taken(next_field, next_location):
            # Food cell already holds a newborn or an earlier mover
            next_location = next((loc for loc in free_locations + [self.location]
                                  if not self.cell_taken(next_field, loc)), None)
        if next_location is not None:
            self.set_location(next_location)
            next_field.place_animal(self, next_location)
        else:
            # Overcrowding
            self.set_dead()

    @abstractmethod
    def increment_hunger(self) -> None:
        """Advance the full/hungry countdown (role-specific thresholds)"""
        pass

    @abstractmethod
    def can_give_birth(self, next_field) -> bool:
        """Whether breeding may be attempted this step"""
        pass

    @abstractmethod
    def choose_next_location(self, current_field, free_locations: List[Location],
                             time: Time) -> Optional[Location]:
        """Feed and/or move. None means there is nowhere to go."""
        pass

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def increment_age(self) -> None:
        """Increase the age. This could result in the animal's death."""
        self.age += 1
        if self.age > self.params.max_age:
            self.set_dead()

    def check_if_infected(self, field) -> None:
        for loc in field.get_adjacent_locations(self.location):
            animal = field.get_animal_at(loc)
            if animal is not None and animal.is_alive() and animal.infected:
                self.infected = True
                return

    def can_act(self, weather: Weather) -> bool:
        """Weather gate: whether the animal moves, feeds or breeds this step."""
        if weather is Weather.CLEAR:
            return True
        if weather is Weather.RAIN:
            return randomizer.uniform_double() < SimulationConfig.RAIN_ACT_PROBABILITY
        if weather is Weather.CLOUDY:
            return randomizer.uniform_double() < SimulationConfig.CLOUDY_ACT_PROBABILITY
        if weather is Weather.STORM:
            return randomizer.uniform_double() < SimulationConfig.STORM_ACT_PROBABILITY
        return False

    # ------------------------------------------------------------------
    # Breeding
    # ------------------------------------------------------------------

    def breed_success(self) -> bool:
        """Breeding age reached and luck on its side."""
        return (self.age >= self.params.breeding_age
                and randomizer.uniform_double() <= self.params.breeding_probability)

    def birth_number(self) -> int:
        return randomizer.uniform_int(self.params.max_litter_size) + 1

    def breed(self) -> int:
        """Number of births this step (may be zero)."""
        if self.breed_success():
            return self.birth_number()
        return 0

    def give_birth(self, next_field, free_locations: List[Location]) -> List['Animal']:
        """
        New births are placed into free adjacent locations, which are consumed
        from the front of free_locations.
        """
        young = []
        if not self.can_give_birth(next_field):
            return young
        births = self.breed()
        for _ in range(births):
            if not free_locations:
                break
            loc = free_locations.pop(0)
            child = create_animal(self.species, loc)
            next_field.place_animal(child, loc)
            young.append(child)
        return young

    def cell_taken(self, field, location: Location) -> bool:
        """Whether another live animal already occupies the location."""
        occupant = field.get_animal_at(location)
        return occupant is not None and occupant is not self and occupant.is_alive()

    def has_compatible_mate(self, field) -> bool:
        """An adjacent live animal of the same species and opposite sex."""
        for loc in field.get_adjacent_locations(self.location):
            animal = field.get_animal_at(loc)
            if (animal is not None and animal.is_alive()
                    and animal.species is self.species
                    and animal.female != self.female):
                return True
        return False


class Prey(Animal):
    """Prey animal - grazes on leaf cells of the plants in its diet"""

    def __init__(self, species: Species, location: Optional[Location],
                 random_age: bool = False) -> None:
        assert species.role is Role.PREY, f"{species} is not a prey species"
        super().__init__(species, location, random_age)
        self.is_full = True
        self.hunger_timer = 0

    def increment_hunger(self) -> None:
        self.hunger_timer += 1
        if self.is_full:
            if self.hunger_timer >= SimulationConfig.PREY_FULL_STEPS:
                self.is_full = False
                self.hunger_timer = 0
        elif self.hunger_timer >= SimulationConfig.PREY_HUNGRY_STEPS:
            self.set_dead()
            self.hunger_timer = 0

    def can_give_birth(self, next_field) -> bool:
        return self.has_compatible_mate(next_field)

    def can_eat(self, leaf_cell) -> bool:
        return leaf_cell.parent_species in self.params.diet

    def can_move(self, time: Time) -> bool:
        """Always moves by day; at night only with the species' probability."""
        if time is Time.DAY:
            return True
        return randomizer.uniform_double() < self.params.night_move_probability

    def find_food(self, field) -> Optional[Location]:
        """
        Look for edible leaves adjacent to the current location.
        Only the first live leaf is eaten.
        """
        for loc in field.get_adjacent_locations(self.location):
            plant = field.get_plant_at(loc)
            if isinstance(plant, LeafCell) and plant.is_alive() and self.can_eat(plant):
                plant.remove_leaf()
                self.hunger_timer = 0
                self.is_full = True
                return loc
        return None

    def choose_next_location(self, current_field, free_locations: List[Location],
                             time: Time) -> Optional[Location]:
        next_location = None
        if not self.is_full:
            next_location = self.find_food(current_field)

        if next_location is None and free_locations:
            if self.can_move(time):
                next_location = free_locations[0]
            else:
                # Rest in place
                next_location = self.location
        return next_location


class Predator(Animal):
    """Predator animal - hunts one prey species with day/night hunt odds"""

    def __init__(self, species: Species, location: Optional[Location],
                 random_age: bool = False) -> None:
        assert species.role is Role.PREDATOR, f"{species} is not a predator species"
        super().__init__(species, location, random_age)
        self.is_full = False
        self.hunger_timer = 0
        self.full_steps = SimulationConfig.PREDATOR_FULL_STEPS
        self.hungry_steps = randomizer.uniform_int(predator_hungry_bound(self.params.prey))

    def is_predator(self) -> bool:
        return True

    def increment_hunger(self) -> None:
        self.hunger_timer += 1
        if self.is_full:
            if self.hunger_timer >= self.full_steps:
                self.is_full = False
                self.hunger_timer = 0
        elif self.hunger_timer >= self.hungry_steps:
            self.set_dead()
            self.hunger_timer = 0

    def can_give_birth(self, next_field) -> bool:
        # Predators do not look for a mate
        return True

    def is_prey(self, animal) -> bool:
        return animal is not None and animal.species is self.params.prey

    def hunt_success(self, time: Time) -> bool:
        if time is Time.NIGHT:
            return randomizer.uniform_double() <= self.params.night_hunt_probability
        return randomizer.uniform_double() <= self.params.day_hunt_probability

    def find_food(self, field, time: Time) -> Optional[Location]:
        """
        Look for prey adjacent to the current location.
        Only the first successful catch is eaten.
        """
        for loc in field.get_adjacent_locations(self.location):
            animal = field.get_animal_at(loc)
            if self.is_prey(animal) and animal.is_alive() and self.hunt_success(time):
                animal.set_dead()
                self.hunger_timer = 0
                self.is_full = True
                return loc
        return None

    def choose_next_location(self, current_field, free_locations: List[Location],
                             time: Time) -> Optional[Location]:
        next_location = self.find_food(current_field, time)
        if next_location is None and free_locations:
            next_location = free_locations.pop(0)
        return next_location


def create_animal(species: Species, location: Optional[Location],
                  random_age: bool = False) -> Animal:
    """Build an animal of the given species with the matching role class."""
    if species.role is Role.PREDATOR:
        return Predator(species, location, random_age)
    return Prey(species, location, random_age)
