import matplotlib.pyplot as plt
import numpy as np
import pytest
from numpy.testing import assert_allclose

import draw_mecanum
from mecanum_drive import mecanum_coordinates


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_component_sweep_traces_both_groups() -> None:
    fig = draw_mecanum.plot_component_sweep(num=72)
    (ax,) = fig.axes
    group_1, group_2 = ax.lines[:2]

    angles = np.radians(group_1.get_xdata())
    expected = mecanum_coordinates(
        np.column_stack([np.cos(angles), np.sin(angles)]))

    assert len(group_1.get_xdata()) == 72
    assert_allclose(group_1.get_ydata(), expected[:, 0], atol=1e-9)
    assert_allclose(group_2.get_ydata(), expected[:, 1], atol=1e-9)
    # two traces plus one marker per group for each design table entry
    assert len(ax.lines) == 2 + 2 * 4


def test_component_sweep_default_samples_whole_degrees() -> None:
    fig = draw_mecanum.plot_component_sweep()
    xdata = np.asarray(fig.axes[0].lines[0].get_xdata())

    assert len(xdata) == 360
    assert_allclose(np.diff(xdata), 1.0, atol=1e-9)
    assert xdata[0] == pytest.approx(-90.0)
    assert xdata[-1] == pytest.approx(269.0)


def test_component_sweep_stays_in_unit_range() -> None:
    fig = draw_mecanum.plot_component_sweep()
    for line in fig.axes[0].lines:
        ydata = np.asarray(line.get_ydata())
        assert np.all(ydata <= 1.0)
        assert np.all(ydata >= -1.0)


def test_direction_map_has_input_and_output_panels() -> None:
    fig = draw_mecanum.plot_direction_map(num=8)
    ax_in, ax_out = fig.axes

    assert ax_in.get_title() == "Requested Direction"
    assert ax_out.get_title() == "Motor Group Coordinate"
    assert len(ax_in.collections) == 1
    assert len(ax_out.texts) == 4


def test_main_saves_both_figures(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(plt, "show", lambda: None)

    draw_mecanum.main()

    assert (tmp_path / draw_mecanum.SWEEP_IMAGE_FILE).exists()
    assert (tmp_path / draw_mecanum.MAP_IMAGE_FILE).exists()
    assert "saved" in capsys.readouterr().out
