import pytest

from algorithms.step import StepBuilder
from engine import EngineEventType, StepEngine, SPEED_PRESETS


def _steps(n=4):
    sb = StepBuilder()
    for i in range(n):
        sb.push(f"step {i}", [i])
    return sb.steps


@pytest.fixture
def engine(clock):
    e = StepEngine(clock=clock)
    e.load_steps(_steps())
    return e


def _record(engine):
    events = []
    engine.subscribe(events.append)
    return events


def test_load_emits_step_change_then_reset(clock):
    e = StepEngine(clock=clock)
    events = _record(e)
    e.load_steps(_steps())

    assert [ev.type for ev in events] == [EngineEventType.STEP_CHANGE, EngineEventType.RESET]
    assert events[0].step.description == "step 0"
    assert e.current_index == 0
    assert not e.is_playing


def test_load_empty_list_only_resets(clock):
    e = StepEngine(clock=clock)
    events = _record(e)
    e.load_steps([])
    assert [ev.type for ev in events] == [EngineEventType.RESET]
    assert e.get_current_step() is None
    assert e.is_at_end


def test_play_and_pause_are_idempotent(engine):
    events = _record(engine)
    engine.play()
    engine.pause()
    engine.pause()

    assert [ev.type for ev in events] == [EngineEventType.PLAY, EngineEventType.PAUSE]


def test_tick_waits_for_speed_then_completes(engine, clock):
    engine.set_speed(100)
    events = _record(engine)
    engine.play()

    clock.advance(99)
    assert engine.tick() is False
    assert engine.current_index == 0

    for expected in (1, 2, 3):
        clock.advance(100)
        assert engine.tick() is True
        assert engine.current_index == expected

    clock.advance(100)
    assert engine.tick() is False
    assert not engine.is_playing
    assert events[-1].type == EngineEventType.COMPLETE


def test_play_at_end_restarts_from_zero(engine):
    engine.go_to_end()
    engine.play()
    assert engine.current_index == 0
    assert engine.is_playing


def test_go_to_step_clamps_and_notifies_on_move_only(engine):
    events = _record(engine)
    engine.go_to_step(99)
    assert engine.current_index == 3
    engine.go_to_step(3)
    engine.go_to_step(-5)
    assert engine.current_index == 0
    assert [ev.index for ev in events] == [3, 0]


def test_step_forward_and_back_stop_at_bounds(engine):
    engine.step_back()
    assert engine.current_index == 0
    for _ in range(10):
        engine.step_forward()
    assert engine.current_index == 3
    assert engine.is_at_end


def test_speed_is_clamped_and_presets_apply(engine):
    engine.set_speed(1)
    assert engine.speed == 50
    engine.set_speed(10_000)
    assert engine.speed == 2000
    engine.set_speed_preset("fast")
    assert engine.speed == SPEED_PRESETS["fast"]
    with pytest.raises(ValueError):
        engine.set_speed_preset("ludicrous")


def test_subscribe_returns_disposer(engine):
    events = []
    dispose = engine.subscribe(events.append)
    engine.step_forward()
    dispose()
    engine.step_forward()
    assert len(events) == 1


def test_stale_frame_callback_is_ignored(clock):
    frames = []
    e = StepEngine(clock=clock, request_frame=frames.append, speed=100)
    e.load_steps(_steps())

    e.play()
    stale = frames.pop()
    e.pause()
    e.play()
    live = frames.pop()

    clock.advance(150)
    stale()
    assert e.current_index == 0
    live()
    assert e.current_index == 1
    assert frames, "a live frame schedules the next one"


def test_run_drives_playback_to_completion(clock):
    e = StepEngine(clock=clock, speed=200)
    e.load_steps(_steps(3))
    sleeps = []

    def fake_sleep(seconds):
        sleeps.append(seconds)
        clock.advance(seconds * 1000)

    e.play()
    e.run(sleep=fake_sleep)

    assert e.current_index == 2
    assert not e.is_playing
    assert sleeps


def test_reset_and_state_snapshot(engine):
    engine.go_to_step(2)
    engine.reset()
    state = engine.state
    assert state.index == 0
    assert len(state.steps) == 4
    assert state.playing is False


def test_destroy_drops_listeners(engine):
    events = _record(engine)
    engine.destroy()
    engine.step_forward()
    assert events == []


def test_step_forward_at_end_is_silent(engine):
    engine.go_to_end()
    events = _record(engine)
    engine.step_forward()
    assert engine.current_index == 3
    assert events == []


def test_reset_while_playing_returns_to_zero(engine, clock):
    engine.set_speed(50)
    engine.play()
    clock.advance(60)
    engine.tick()
    engine.reset()
    assert engine.current_index == 0
    assert not engine.is_playing
