"""Example pipeline: solve one balancing case and render both diagrams to TikZ."""

from pathlib import Path

from rotor_balance import BalancingController, TikzRenderTarget, Wheel, parse_payload, solve_iterative

PAYLOAD = {
    "v0": 7,
    "runs": [
        {"r": 4, "theta": 0},
        {"r": 3.5, "theta": 120},
        {"r": 5, "theta": 240},
    ],
}


def main() -> None:
    solver_input = parse_payload(PAYLOAD)
    tri_target = TikzRenderTarget(800, 600)
    vec_target = TikzRenderTarget(800, 600)
    controller = BalancingController(800, 600, trilateration_target=tri_target, vector_target=vec_target)

    report = controller.calculate(solver_input)
    solution = report.result.solution
    print("Intersection:")
    print(f"  point: ({solution.x:.6f}, {solution.y:.6f})")
    print(f"  r={solution.r:.4f}, theta={solution.theta_deg:.2f}, rms={solution.rms_error:.4f}")

    vectors = report.result.vectors
    print("Vector sum:")
    print(f"  resultant: r={vectors.resultant.r:.4f}, theta={vectors.resultant.theta_deg:.2f}")
    print(f"  opposite:  r={vectors.opposite.r:.4f}, theta={vectors.opposite.theta_deg:.2f}")

    for method in ("A", "B"):
        iterative = solve_iterative(solver_input.base_amplitude, solver_input.runs, method)
        print(f"Least squares ({method}): r={iterative.r:.4f}, theta={iterative.theta_deg:.2f}, nfev={iterative.nfev}")

    # zoom the vector view in twice before exporting
    controller.dispatch("vectors", Wheel(-1))
    controller.dispatch("vectors", Wheel(-1))

    out_dir = Path("out")
    out_dir.mkdir(exist_ok=True)
    (out_dir / "trilateration.tex").write_text(tri_target.document(title="Trilateration"), encoding="utf-8")
    (out_dir / "vectors.tex").write_text(vec_target.document(title="Vector sum"), encoding="utf-8")
    print(f"Wrote TikZ documents to {out_dir}/")


if __name__ == "__main__":
    main()
