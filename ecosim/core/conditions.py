"""
Global conditions: day/night cycle and weather
"""

from enum import Enum

from ecosim.core import randomizer


class Time(Enum):
    """Day/night cycle"""
    DAY = "day"
    NIGHT = "night"

    def __str__(self) -> str:
        return self.value

    def flipped(self) -> 'Time':
        return Time.NIGHT if self is Time.DAY else Time.DAY


class Weather(Enum):
    """Possible states of weather"""
    RAIN = "rain"
    STORM = "storm"
    CLEAR = "clear"
    CLOUDY = "cloudy"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def random_weather(cls) -> 'Weather':
        """Return a uniformly drawn weather value."""
        return randomizer.choice(list(cls))
