import threading
import time

import pytest

from algorithms import require_algorithm, REGISTRY, KIND_GRID
from algorithms.bars import make_bars
from grid import Grid
from algorithms.step import PHASE_PATH
from engine import (
    Run, RunTokens, StepStatus, Stepper, StepperState, VisualizerSession,
    NullWaiter, EventWaiter, SleepWaiter, Recorder,
)


def make_run(key, data, tokens=None, log=None, **kwargs):
    tokens = tokens or RunTokens()
    frames, lines = [], []
    run = Run(
        info=require_algorithm(key),
        token=tokens.new_token(),
        tokens=tokens,
        data=data,
        render=frames.append,
        log=log or lines.append,
        **kwargs
    )
    return run, tokens, frames, lines


def run_out(run, limit=100000):
    statuses = []
    for _ in range(limit):
        status = run.step()
        statuses.append(status)
        if status is StepStatus.DONE:
            return statuses
    raise AssertionError("run never finished")


@pytest.fixture
def open_grids(monkeypatch):
    """Sessions get wall-free grids, so searches are guaranteed to run for a while."""
    def fake_input(info, seed=None):
        if info.kind == KIND_GRID:
            return Grid()
        return make_bars(seed=seed)
    monkeypatch.setattr("engine.session.make_input", fake_input)


def drain(vs, limit=100000):
    ticks = []
    for _ in range(limit):
        tick = vs.tick()
        ticks.append(tick)
        if tick.status is StepStatus.DONE:
            return ticks
    raise AssertionError("session never finished")


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
def test_run_to_completion_statuses():
    run, _, frames, lines = make_run("bubble", [3, 2, 1])
    statuses = run_out(run)
    assert statuses[-2:] == [StepStatus.CONTINUE, StepStatus.DONE]
    assert all(s is StepStatus.SUSPEND for s in statuses[:-2])
    assert len(frames) == 1 + 3 + 1
    assert lines == ["Bubble: start", "Bubble: done"]
    assert run.finished and not run.stopped


def test_stale_token_stops_run_with_single_line():
    run, tokens, frames, lines = make_run("bubble", [5, 4, 3, 2, 1])
    run.step()
    run.step()
    tokens.new_token()
    assert run.step() is StepStatus.DONE
    assert len(frames) == 2
    assert lines == ["Bubble: start", "Bubble: stopped"]
    assert run.step() is StepStatus.DONE
    assert lines == ["Bubble: start", "Bubble: stopped"]
    assert run.stopped


def test_token_invalidated_during_resume_blocks_the_frame(snake_grid):
    tokens = RunTokens()
    lines = []

    def log(line):
        lines.append(line)
        if line == "BFS: path found":
            tokens.new_token()

    run, _, frames, _ = make_run("bfs", snake_grid, tokens=tokens, log=log)
    run_out(run)
    assert lines[-2:] == ["BFS: path found", "BFS: stopped"]
    assert not [f for f in frames if f.phase == PHASE_PATH]
    assert frames[-1].current == snake_grid.goal


def test_stop_during_path_phase_interrupts_by_default(snake_grid):
    run, tokens, frames, lines = make_run("bfs", snake_grid)
    while run.step() is not StepStatus.DONE and run.last_step.phase != PHASE_PATH:
        pass
    tokens.new_token()
    run_out(run)
    assert len([f for f in frames if f.phase == PHASE_PATH]) == 1
    assert lines[-1] == "BFS: stopped"


def test_path_phase_can_ignore_stop(snake_grid):
    run, tokens, frames, lines = make_run("bfs", snake_grid, cancel_during_path=False)
    while run.step() is not StepStatus.DONE and run.last_step.phase != PHASE_PATH:
        pass
    tokens.new_token()
    run_out(run)
    assert len([f for f in frames if f.phase == PHASE_PATH]) == 20
    assert "BFS: stopped" not in lines
    assert run.finished


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
def test_stepper_waits_between_steps():
    run, _, frames, _ = make_run("bubble", [4, 3, 2, 1])
    waiter = NullWaiter()
    seen = []
    stepper = Stepper(waiter=waiter, speed=100, on_step=seen.append, record=True)
    assert stepper.drive(run) is StepperState.FINISHED
    assert waiter.waits == [300] + [10] * 6
    assert len(stepper.steps) == len(seen) == len(frames) == 8
    assert stepper.is_finished and not stepper.is_stopped
    assert stepper.current_step is frames[-1]
    assert list(stepper.current_step.values) == [1, 2, 3, 4]


def test_stepper_reads_speed_live():
    run, _, _, _ = make_run("bubble", [2, 1, 0])
    waiter = NullWaiter()
    stepper = Stepper(waiter=waiter, speed=100)
    stepper.attach(run)
    stepper.advance()
    stepper.advance()
    stepper.set_speed(1)
    stepper.advance()
    assert waiter.waits == [300, 10, 198]


def test_stepper_reports_stopped():
    tokens = RunTokens()
    run, _, _, lines = make_run("merge", [9, 8, 7, 6, 5], tokens=tokens)
    count = []

    def on_step(step):
        count.append(step)
        if len(count) == 3:
            tokens.new_token()

    stepper = Stepper(waiter=NullWaiter(), on_step=on_step)
    assert stepper.drive(run) is StepperState.STOPPED
    assert len(count) == 3
    assert lines[-1] == "Merge: stopped"


def test_stepper_requires_a_run():
    with pytest.raises(RuntimeError):
        Stepper(waiter=NullWaiter()).advance()


def test_recorder_requires_start():
    rec = Recorder()
    with pytest.raises(RuntimeError):
        rec.run_to_completion()
    assert rec.metrics is None


def test_default_waiter_sleeps(monkeypatch):
    slept = []
    monkeypatch.setattr("engine.pacing.time.sleep", slept.append)
    run, _, _, _ = make_run("bubble", [2, 1])
    stepper = Stepper(speed=100)
    assert isinstance(stepper.waiter, SleepWaiter)
    assert stepper.drive(run) is StepperState.FINISHED
    assert slept == [0.3, 0.01]


def test_stop_from_another_thread(snake_grid):
    run, tokens, frames, lines = make_run("dfs", snake_grid)
    stepper = Stepper(waiter=EventWaiter(), speed=1)
    worker = threading.Thread(target=stepper.drive, args=(run,))
    worker.start()
    time.sleep(0.05)
    tokens.new_token()
    stepper.cancel()
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert stepper.is_stopped
    assert lines[-1] == "DFS: stopped"
    rendered = len(frames)
    assert run.step() is StepStatus.DONE
    assert len(frames) == rendered


# ---------------------------------------------------------------------------
# VisualizerSession
# ---------------------------------------------------------------------------
def test_select_clears_log_without_starting():
    vs = VisualizerSession(seed=1)
    vs.log.append("old line")
    desc = vs.select("dijkstra")
    assert desc == REGISTRY["dijkstra"].description
    assert vs.log.lines == []
    assert vs.run is None
    assert vs.selected == "dijkstra"
    assert vs.start_enabled


def test_select_unknown_algorithm():
    vs = VisualizerSession()
    with pytest.raises(ValueError):
        vs.select("quicksort")
    with pytest.raises(ValueError):
        vs.start("quicksort")
    assert vs.start_enabled


def test_start_is_ignored_while_running():
    vs = VisualizerSession(seed=2)
    assert vs.start("bfs")
    run = vs.run
    assert not vs.start_enabled
    assert not vs.start("dfs")
    assert vs.run is run
    assert vs.selected == "bfs"


@pytest.mark.parametrize("key", sorted(REGISTRY))
def test_run_completes_and_reenables_start(key):
    vs = VisualizerSession(seed=4, speed=100)
    vs.start(key)
    ticks = drain(vs)
    name = REGISTRY[key].log_name
    assert vs.start_enabled
    assert not vs.running
    assert vs.log.lines[0] == f"{name}: start"
    assert len(vs.log) == 2
    assert vs.frame is not None
    assert ticks[-1].step is None


def test_final_sorted_frame_has_no_delay():
    vs = VisualizerSession(seed=3)
    vs.start("merge")
    ticks = drain(vs)
    assert ticks[-2].status is StepStatus.CONTINUE
    assert ticks[-2].delay_ms is None
    assert ticks[0].delay_ms == 300


@pytest.mark.parametrize("key", ["bubble", "merge", "bfs", "astar"])
@pytest.mark.parametrize("stop_after", [0, 1, 7, 60])
def test_stop_allows_only_the_stopped_line(open_grids, key, stop_after):
    vs = VisualizerSession(seed=9)
    vs.start(key)
    for _ in range(stop_after):
        vs.tick()
    frame = vs.frame
    vs.stop()
    assert vs.start_enabled
    assert vs.log.lines[-1] == "Stopped."
    before = len(vs.log)

    for _ in range(5):
        assert vs.tick().status is StepStatus.DONE
    assert vs.frame is frame
    assert len(vs.log) == before + 1
    assert vs.log.lines[-1] == f"{REGISTRY[key].log_name}: stopped"


def test_restart_after_stop_starts_clean(open_grids):
    vs = VisualizerSession(seed=5)
    vs.start("bfs")
    vs.tick()
    vs.tick()
    old = vs.run
    vs.stop()
    assert vs.start("dfs")
    assert old.stopped
    assert vs.log.lines == []
    assert vs.run.data is not old.data
    vs.tick()
    assert vs.log.lines == ["DFS: start"]


def test_finished_old_run_never_touches_new_one():
    vs = VisualizerSession(seed=6)
    vs.start("bubble")
    vs.tick()
    vs.stop()
    vs.start("merge")
    ticks = [vs.tick() for _ in range(3)]
    assert all(t.step.kind == "bars" for t in ticks)
    assert "Bubble: stopped" not in vs.log.lines


def test_speed_changes_take_effect_next_tick():
    vs = VisualizerSession(seed=7, speed=100)
    vs.start("bubble")
    assert vs.tick().delay_ms == 300
    assert vs.tick().delay_ms == 10
    assert vs.set_speed(1) == 1
    assert vs.tick().delay_ms == 198


def test_tick_without_run():
    assert VisualizerSession().tick().status is StepStatus.DONE


def test_state_snapshot():
    vs = VisualizerSession(speed=20)
    vs.select("astar")
    state = vs.state()
    assert state["selected"] == "astar"
    assert state["speed"] == 20
    assert state["start_enabled"] is True
    assert state["running"] is False
    assert state["log"] == []
