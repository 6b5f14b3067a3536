"""
Ecosystem Simulation - main entry point

Runs the grid ecosystem (Armadillo, Giraffe, Ocelot, Snake, Lion, BerryShrub,
Tree) with an optional live matplotlib view.

Usage:
    python main.py                     # 100x150 field, 700 steps, live view
    python main.py --steps 200 --no-view
    python main.py --depth 60 --width 80 --quiet
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.absolute()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from ecosim.config import SimulationConfig
from ecosim.simulator import Simulator


def print_summary(stats):
    print("\n" + "=" * 70)
    print("SIMULATION COMPLETE")
    print("=" * 70)
    print(f"\nSteps run: {stats['total_steps']}")
    print(f"Still viable: {stats['viable']}")
    print("\nFinal Population:")
    for species, count in stats['final_counts'].items():
        print(f"  * {species}: {count}")
    print(f"  * Infected: {stats['final_infected']}")
    print(f"  * Leaves: {stats['final_leaves']}")
    print("\nPeak Population:")
    for species, count in stats['peak_counts'].items():
        print(f"  * {species}: {count}")
    print(f"\nDuration: {stats['duration']:.2f} seconds")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Run the grid ecosystem simulation')
    parser.add_argument('--depth', type=int, default=SimulationConfig.DEFAULT_DEPTH,
                        help='Number of rows in the field')
    parser.add_argument('--width', type=int, default=SimulationConfig.DEFAULT_WIDTH,
                        help='Number of columns in the field')
    parser.add_argument('--steps', type=int, default=None,
                        help='Steps to run (default: a long run)')
    parser.add_argument('--long', action='store_true',
                        help=f'Run the long simulation ({SimulationConfig.LONG_RUN_STEPS} steps)')
    parser.add_argument('--no-view', action='store_true',
                        help='Run without the matplotlib window')
    parser.add_argument('--quiet', action='store_true',
                        help='Do not print the per-step report line')
    parser.add_argument('--delay', type=float, default=None,
                        help='Seconds between steps while the view is open')
    args = parser.parse_args(argv)

    if args.delay is not None:
        SimulationConfig.apply_overrides({'STEP_DELAY': args.delay})
        print(SimulationConfig.describe(), end="")

    print("\n" + "=" * 70)
    print("  ECOSYSTEM SIMULATION")
    print("  Predators, prey and growing plants under day/night and weather")
    print("=" * 70)

    simulator = Simulator(args.depth, args.width, verbose=not args.quiet)
    if not args.no_view:
        from ecosim.visualizer import FieldVisualizer
        simulator.attach_view(FieldVisualizer(simulator.field.depth, simulator.field.width))

    print(f"\nField: {simulator.field.depth}x{simulator.field.width}")
    print(f"  * Animals: {len(simulator.field.animals)}")
    print(f"  * Plants: {len(simulator.field.plants)}")
    print("\n" + "-" * 70)
    print("SIMULATION RUNNING")
    print("-" * 70)

    try:
        if args.long or args.steps is None:
            stats = simulator.run_long_simulation()
        else:
            stats = simulator.simulate(args.steps)
    except KeyboardInterrupt:
        print("\n\nSimulation interrupted by user")
        stats = simulator.summary()

    print_summary(stats)
    return 0


if __name__ == "__main__":
    sys.exit(main())
