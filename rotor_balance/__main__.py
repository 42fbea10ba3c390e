import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rotor_balance import (
    BalancingController,
    TikzRenderTarget,
    ValidationError,
    build_solver_input,
    solve_iterative,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Compute a rotor balancing correction from three test runs")
    parser.add_argument("--v0", required=True, help="Base (initial) vibration amplitude")
    parser.add_argument(
        "--run",
        nargs=2,
        action="append",
        metavar=("AMPLITUDE", "PHASE"),
        default=[],
        help="Test run amplitude and phase in degrees; give exactly three",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the /calculate response body instead of a text report",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Also run the iterative least-squares solver for methods A and B",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document of the chosen view to the given path",
    )
    parser.add_argument(
        "--tikz-view",
        choices=["trilateration", "vectors"],
        default="trilateration",
        help="Diagram written by --tikz-output-path (default: trilateration)",
    )
    parser.add_argument("--width", type=float, default=800.0, help="Canvas width in pixels")
    parser.add_argument("--height", type=float, default=600.0, help="Canvas height in pixels")
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        solver_input = build_solver_input(args.v0, [{"r": r, "theta": theta} for r, theta in args.run])
    except ValidationError as exc:
        parser.error(str(exc))

    targets = {
        "trilateration": TikzRenderTarget(args.width, args.height),
        "vectors": TikzRenderTarget(args.width, args.height),
    }
    controller = BalancingController(
        args.width,
        args.height,
        trilateration_target=targets["trilateration"],
        vector_target=targets["vectors"],
    )
    report = controller.calculate(solver_input)
    result = report.result

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        solution = result.solution
        print("Trilateration:")
        if solution.degenerate:
            print("  degenerate: circle centers are collinear or concentric")
        else:
            print(f"  magnitude: {solution.r:.3f}")
            print(f"  phase: {solution.theta_deg:.1f}°")
            print(f"  point: ({solution.x:.6f}, {solution.y:.6f})")
            print(f"  rms error: {solution.rms_error:.2e}")
        print("Vectors:")
        print(f"  resultant: r={result.vectors.resultant.r:.3f}, θ={result.vectors.resultant.theta_deg:.1f}°")
        print(f"  opposite: r={result.vectors.opposite.r:.3f}, θ={result.vectors.opposite.theta_deg:.1f}°")
        print("Legend:")
        for entry in report.trilateration_legend + report.vector_legend:
            print(f"  - {entry.label}")

    if args.compare:
        print("Iterative comparison:")
        for method in ("A", "B"):
            iterative = solve_iterative(solver_input.base_amplitude, solver_input.runs, method)
            print(
                f"  method {method}: r={iterative.r:.3f}, θ={iterative.theta_deg:.1f}°, "
                f"rms={iterative.rms_error:.2e}, success={iterative.success}"
            )

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        title = "Trilateration" if args.tikz_view == "trilateration" else "Vector sum"
        output_path.write_text(targets[args.tikz_view].document(title=title), encoding="utf-8")
        print(f"TikZ document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
