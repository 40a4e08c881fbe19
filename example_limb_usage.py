"""Example usage of the limb IK solver without any GUI.
Run: python example_limb_usage.py
"""
from forward_kinematics import evaluate
from ik_solver import DegenerateTargetError, IKSolver

# Explicit geometry (replace with your rig's values)
UPPER_LEG = 80.0   # proximal segment (hip -> knee)
LOWER_LEG = 60.0   # distal segment (knee -> foot)
HIP = (0.0, 0.0)

# Sample foot targets, +y away from the body
TARGETS = [
    (0.0, 140.0),    # exactly at max reach, leg straight
    (40.0, 100.0),   # bent knee
    (0.0, 200.0),    # out of reach, leg points at it
    (0.0, 0.0),      # on the hip itself, rejected
]


def main() -> None:
    solver = IKSolver(proximal_len=UPPER_LEG, distal_len=LOWER_LEG)
    for t in TARGETS:
        try:
            sol = solver.solve(HIP, t)
        except DegenerateTargetError as exc:
            print(f"Target {t}: rejected ({exc})")
            continue
        knee, foot = evaluate(HIP, sol.proximal_angle, UPPER_LEG, sol.distal_angle, LOWER_LEG)
        print(f"Target {t}: {sol.reach.value} hip={sol.proximal_angle:.3f} rad "
              f"knee={sol.distal_angle:.3f} rad -> knee=({knee[0]:.1f}, {knee[1]:.1f}) "
              f"foot=({foot[0]:.1f}, {foot[1]:.1f})")


if __name__ == "__main__":
    main()
