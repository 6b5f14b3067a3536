"""Grid ecosystem simulation: predators, prey and growing plants."""
