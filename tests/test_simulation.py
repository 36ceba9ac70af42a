import io
import logging

import pytest

from value_source_demo.config import Config, SimulationConfig
from value_source_demo.main import main
from value_source_demo.simulation import Simulation, tick_count


def _run_default():
    out = io.StringIO()
    sim = Simulation(Config(), out=out)
    executed = sim.run()
    return sim, executed, out.getvalue().splitlines()


def test_default_run_is_ten_ticks():
    sim, executed, _ = _run_default()
    assert executed == 10
    assert sim.finished
    assert sim.time == pytest.approx(1.0)


def test_each_tick_prints_time_then_three_objects():
    _, _, lines = _run_default()
    assert len(lines) == 40
    assert lines[:4] == [
        "Tick at 0.1",
        "Classic object position: 1.4",
        "Value-source object position: 1.4",
        "Reactive programming object position: 1.4",
    ]


def test_all_three_styles_agree_at_the_end():
    sim, _, lines = _run_default()
    assert lines[-4:] == [
        "Tick at 1",
        "Classic object position: 5",
        "Value-source object position: 5",
        "Reactive programming object position: 5",
    ]
    assert sim.classic.position == pytest.approx(5.0)
    assert sim.movement.get_current_value() == pytest.approx(5.0)
    assert sim.lerp.get_current_value() == 5.0


def test_styles_track_each_other_every_tick():
    _, _, lines = _run_default()
    for i in range(0, len(lines), 4):
        values = {line.split(": ")[1] for line in lines[i + 1:i + 4]}
        assert len(values) == 1


def test_interpolator_clamps_past_end_of_range():
    out = io.StringIO()
    config = Config(simulation=SimulationConfig(dt=0.5, end_time=2.0))
    sim = Simulation(config, out=out)
    sim.run()

    lines = out.getvalue().splitlines()
    assert lines[-4] == "Tick at 2"
    assert lines[-1] == "Reactive programming object position: 5"
    assert lines[-2] == "Value-source object position: 9"


def test_single_tick_updates_state():
    sim = Simulation(Config(), out=io.StringIO())
    sim.tick()
    assert sim.tick_number == 1
    assert sim.lerp.time == pytest.approx(0.1)
    assert sim.movement.get_current_value() == pytest.approx(1.4)


@pytest.mark.parametrize(
    "dt, end_time, expected",
    [(0.1, 1.0, 10), (0.25, 1.0, 4), (0.3, 1.0, 3), (0.5, 0.4, 0), (1.0, 1.0, 1)],
)
def test_tick_count(dt, end_time, expected):
    assert tick_count(dt, end_time) == expected


def test_non_positive_step_is_rejected():
    with pytest.raises(ValueError):
        Simulation(Config(simulation=SimulationConfig(dt=0.0)))


def test_main_prints_simulation_to_stdout(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 40
    assert lines[0] == "Tick at 0.1"
    assert lines[-1] == "Reactive programming object position: 5"


def test_main_uses_config_file(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("simulation:\n  dt: 0.5\nclassic:\n  velocity: 2\n")
    main(["--config", str(path)])
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Tick at 0.5",
        "Classic object position: 2",
        "Value-source object position: 3",
        "Reactive programming object position: 3",
        "Tick at 1",
        "Classic object position: 3",
        "Value-source object position: 5",
        "Reactive programming object position: 5",
    ]


def test_run_reports_only_remaining_ticks(caplog):
    sim = Simulation(Config(), out=io.StringIO())
    sim.tick()
    sim.tick()

    with caplog.at_level(logging.INFO, logger="value-source-demo"):
        executed = sim.run()

    assert executed == 8
    assert "Running 8 ticks" in caplog.text


def test_floor_rule_at_coarse_step():
    # 0.5 and 1.0 are the only post-increment times within 1.0
    sim = Simulation(Config(simulation=SimulationConfig(dt=0.5)), out=io.StringIO())
    assert sim.total_ticks == 2
    assert sim.run() == 2
    assert sim.time == 1.0
