"""Entry point for kickabout package."""

import argparse
import logging


def _demo_intents(goal_x: float, goal_y: float, frames: int):
    """Scripted input: run at the goal, wind up, shoot, repeat."""
    from kickabout.simulation import InputIntent
    from kickabout.simulation.core.vec2 import Vec2

    cycle = 180
    for frame in range(frames):
        phase = frame % cycle
        target = Vec2(goal_x - 200, goal_y)
        yield InputIntent(
            pointer=target,
            sprint=phase < 60,
            shoot_held=100 <= phase < 150,
        )


def main() -> None:
    """Main entry point for the Kickabout application."""
    parser = argparse.ArgumentParser(
        description="Kickabout - real-time 2D football simulation",
        prog="kickabout",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run a scripted headless session (no TUI)",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Serve the HTTP session API instead of the TUI",
    )
    parser.add_argument("--host", type=str, default="127.0.0.1", help="API host (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="API port (default: 8000)")
    parser.add_argument("--width", type=float, default=800.0, help="Field width (default: 800)")
    parser.add_argument("--height", type=float, default=600.0, help="Field height (default: 600)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for dodges")
    parser.add_argument("--frames", type=int, default=1800, help="Frames to run in demo mode (default: 1800)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.serve:
        from kickabout.api.main import run_server

        run_server(host=args.host, port=args.port)
    elif args.demo:
        from kickabout.logging import SessionLog
        from kickabout.simulation import Orchestrator

        print("Kickabout (Demo Mode)")
        print("=" * 50)

        orch = Orchestrator(width=args.width, height=args.height, seed=args.seed)
        log = SessionLog(orch.event_bus)
        orch.start_session()

        goal = orch.state.goal.center
        orch.run(args.frames, _demo_intents(goal.x, goal.y, args.frames))
        orch.stop()

        for entry in log.entries:
            print(entry.format())
        print()
        print(log.format_summary())
    else:
        from kickabout.ui.app import run_app

        run_app(width=args.width, height=args.height, seed=args.seed)


if __name__ == "__main__":
    main()
