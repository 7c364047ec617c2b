"""CLI main entry point."""

import argparse
import sys
from dataclasses import replace
from gravity_sim.backends.factory import get_backend, list_available_backends
from gravity_sim.physics.force_calculator import FORCE_METHODS
from gravity_sim.physics.simulator import Simulator
from gravity_sim.presets import PRESETS, get_preset
from gravity_sim.utils.config import Config, load_config


def build_config(args) -> Config:
    """Merge config file values with command line overrides."""
    config = load_config(args.config) if args.config else Config()
    overrides = {
        'preset': args.preset,
        'n_steps': args.steps,
        'dt': args.dt,
        'force_method': args.force_method,
        'min_distance': args.min_distance,
        'backend': args.backend,
        'report_every': args.report_every,
        'camera_scale': args.camera_scale,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if args.render:
        overrides['render'] = True
    if args.trails:
        overrides['show_trails'] = True
    return replace(config, **overrides)


def run_simulation(config: Config, extended: bool = False):
    """Run a simulation."""
    backend = get_backend(config.backend)
    preset_kwargs = {'extended': True} if extended and config.preset == 'sun_planets' else {}
    preset = get_preset(config.preset, **preset_kwargs)
    templates = preset.generate()

    sim = Simulator(
        dt=config.dt,
        force_method=config.force_method,
        min_distance=config.min_distance,
        backend=backend,
    )
    sim.initialize(templates)

    renderer = None
    if config.render:
        from gravity_sim.render.camera import Camera
        from gravity_sim.render.renderer_2d import Renderer2D
        camera = Camera(
            scale=config.camera_scale,
            max_scale=max(config.camera_scale, 10.0),
            zoom_sensitivity=config.zoom_sensitivity,
        )
        renderer = Renderer2D(
            templates,
            camera=camera,
            show_trails=config.show_trails,
            trail_length=config.trail_length,
        )

    diagnostics = sim.diagnostics
    clamp = "none" if config.min_distance is None else f"{config.min_distance:g}"
    print(f"Running simulation: {preset.name} with {sim.system.n_bodies} bodies")
    print(f"Backend: {backend.name}, Integrator: {sim.integrator.name}, "
          f"Forces: {config.force_method}, dt: {config.dt}, min distance: {clamp}")

    K0, U0, E0 = diagnostics.compute_energies(sim.system.positions, sim.system.velocities, sim.system.masses)
    p0 = diagnostics.total_momentum(sim.system.velocities, sim.system.masses)

    print(f"{'Step':<8} {'Time':<10} {'px':<12} {'py':<12} {'K':<12} {'U':<12} {'E':<12} {'dE/E0':<10}")
    print("-" * 92)
    print(f"{0:<8} {0.0:<10.2f} {p0[0]:<12.4f} {p0[1]:<12.4f} {K0:<12.4f} {U0:<12.4f} {E0:<12.4f} {0.0:<10.4f}%")

    for step in range(1, config.n_steps + 1):
        sim.step()

        if renderer:
            renderer.render(sim.system.positions, sim.system.velocities)
            if not renderer.is_open:
                print("Viewer closed, stopping.")
                break

        if step % config.report_every == 0:
            K, U, E = diagnostics.compute_energies(sim.system.positions, sim.system.velocities, sim.system.masses)
            p = diagnostics.total_momentum(sim.system.velocities, sim.system.masses)
            dE = (E - E0) / abs(E0) * 100 if abs(E0) > 0 else 0.0
            print(f"{step:<8} {sim.time:<10.2f} {p[0]:<12.4f} {p[1]:<12.4f} {K:<12.4f} {U:<12.4f} {E:<12.4f} {dE:<10.4f}%")

    if renderer:
        renderer.close()

    print("Simulation complete!")
    return sim


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Gravity Simulator - exact N-body gravity in 2D")

    # Simulation parameters
    parser.add_argument('--config', type=str, default=None,
                        help='Config file (.json or .yaml); command line flags override it')
    parser.add_argument('--preset', type=str, default=None, choices=list(PRESETS.keys()),
                        help='Preset scene (default: sun_planets)')
    parser.add_argument('--extended', action='store_true',
                        help='Add the fourth, distant body to the sun_planets scene')
    parser.add_argument('--steps', type=int, default=None,
                        help='Number of simulation steps (default: 1000)')
    parser.add_argument('--dt', type=float, default=None,
                        help='Fixed time step (default: 1.5)')
    parser.add_argument('--force-method', type=str, default=None, choices=list(FORCE_METHODS),
                        help='Force accumulation method (default: direct)')
    parser.add_argument('--min-distance', type=float, default=None,
                        help='Clamp separations below this value in the force law (default: no clamp)')
    parser.add_argument('--backend', type=str, default=None,
                        help='Compute backend for vectorized forces (default: numpy)')
    parser.add_argument('--report-every', type=int, default=None,
                        help='Print diagnostics every N steps (default: 100)')

    # Rendering
    parser.add_argument('--render', action='store_true',
                        help='Open the interactive viewer (drag to pan, scroll to zoom)')
    parser.add_argument('--trails', action='store_true',
                        help='Draw body trails')
    parser.add_argument('--camera-scale', type=float, default=None,
                        help='Initial world units per pixel (default: 10)')

    # Info
    parser.add_argument('--list-presets', action='store_true',
                        help='List available presets and exit')
    parser.add_argument('--list-backends', action='store_true',
                        help='List available backends and exit')

    args = parser.parse_args(argv)

    if args.list_presets:
        print("Available presets:")
        for name in PRESETS:
            print(f"  - {name}")
        return 0

    if args.list_backends:
        print("Available backends:")
        for backend in list_available_backends():
            print(f"  - {backend}")
        return 0

    try:
        config = build_config(args)
        run_simulation(config, extended=args.extended)
    except (ValueError, TypeError, ImportError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
