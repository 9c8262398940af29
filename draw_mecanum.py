import numpy as np
import matplotlib.pyplot as plt

from mecanum_constants import DESIGN_TABLE
from mecanum_drive import mecanum_coordinates

# ------ Figure Outputs ------
SWEEP_IMAGE_FILE = "mecanum_component_sweep.png"
MAP_IMAGE_FILE = "mecanum_direction_map.png"
# ----------------------------

GROUP_1_COLOR = "tab:blue"
GROUP_2_COLOR = "tab:orange"


def _unit_directions(angles: np.ndarray) -> np.ndarray:
    return np.column_stack([np.cos(angles), np.sin(angles)])


def plot_component_sweep(num: int = 360):
    """
    Plot both motor group coordinates while the requested direction sweeps
    once around the unit circle, starting at the negative Y-axis.
    """
    angles = np.linspace(-np.pi / 2, 3 * np.pi / 2, num, endpoint=False)
    groups = mecanum_coordinates(_unit_directions(angles))

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(np.degrees(angles), groups[:, 0],
            color=GROUP_1_COLOR, label="Motor group 1 (FL, RR)")
    ax.plot(np.degrees(angles), groups[:, 1],
            color=GROUP_2_COLOR, label="Motor group 2 (FR, RL)")

    # Design table checkpoints
    for (x, y), (g1, g2) in DESIGN_TABLE.items():
        theta = np.degrees(np.arctan2(y, x))
        if theta < -90:
            theta += 360
        ax.plot(theta, g1, "o", color=GROUP_1_COLOR)
        ax.plot(theta, g2, "s", color=GROUP_2_COLOR)

    ax.set_title("Mecanum Motor Group Coordinates vs. Requested Direction")
    ax.set_xlabel("Direction Angle (degrees)")
    ax.set_ylabel("Motor Group Coordinate")
    ax.set_xticks(np.arange(-90, 271, 45))
    ax.set_ylim(-1.1, 1.1)
    ax.grid(True, linestyle="--", alpha=0.4)
    ax.legend(loc="lower left")
    fig.tight_layout()
    return fig


def plot_direction_map(num: int = 16):
    """Side by side quiver of requested directions and their mapped coordinates."""
    angles = np.linspace(0, 2 * np.pi, num, endpoint=False)
    directions = _unit_directions(angles)
    groups = mecanum_coordinates(directions)
    colors = plt.cm.hsv(angles / (2 * np.pi))

    fig, (ax_in, ax_out) = plt.subplots(1, 2, figsize=(12, 6))
    for ax, vectors, title, xlabel, ylabel in (
        (ax_in, directions, "Requested Direction", "Strafe (x)", "Drive (y)"),
        (ax_out, groups, "Motor Group Coordinate", "Group 1", "Group 2"),
    ):
        ax.quiver(np.zeros(num), np.zeros(num), vectors[:, 0], vectors[:, 1],
                  color=colors, angles="xy", scale_units="xy", scale=1)
        ax.add_patch(plt.Circle((0, 0), 1.0, fill=False, ls=":", lw=1.2))
        ax.set_aspect("equal", "box")
        ax.set_xlim(-1.2, 1.2)
        ax.set_ylim(-1.2, 1.2)
        ax.grid(True, linestyle="--", alpha=0.4)
        ax.set_title(title)
        ax.set_xlabel(xlabel)
        ax.set_ylabel(ylabel)

    for (x, y), (g1, g2) in DESIGN_TABLE.items():
        ax_in.annotate(f"({x:+.0f}, {y:+.0f})", (x, y),
                       textcoords="offset points", xytext=(5, 5))
        ax_out.annotate(f"({x:+.0f}, {y:+.0f})", (g1, g2),
                        textcoords="offset points", xytext=(5, 5))
    fig.tight_layout()
    return fig


def main():
    fig = plot_component_sweep()
    fig.savefig(SWEEP_IMAGE_FILE, dpi=150)
    print(f"Component sweep saved to '{SWEEP_IMAGE_FILE}'.")

    fig = plot_direction_map()
    fig.savefig(MAP_IMAGE_FILE, dpi=150)
    print(f"Direction map saved to '{MAP_IMAGE_FILE}'.")
    plt.show()


if __name__ == "__main__":
    main()
