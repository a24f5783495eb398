from lucky_wheel.config import WheelState
from lucky_wheel.core.state_machine import StateMachine


def test_starts_idle():
    machine = StateMachine()
    assert machine.is_state(WheelState.IDLE)
    assert machine.previous_state is None


def test_transitions_call_exit_then_enter():
    machine = StateMachine()
    calls = []
    machine.register_handlers(WheelState.IDLE, exit_handler=lambda: calls.append("exit idle"))
    machine.register_handlers(WheelState.SPINNING, enter=lambda: calls.append("enter spinning"))

    machine.transition_to(WheelState.SPINNING)
    assert calls == ["exit idle", "enter spinning"]
    assert machine.previous_state == WheelState.IDLE


def test_same_state_transition_is_ignored():
    machine = StateMachine()
    calls = []
    machine.register_handlers(WheelState.IDLE, enter=lambda: calls.append("enter"))
    machine.transition_to(WheelState.IDLE)
    assert calls == []


def test_transition_data_is_available_to_enter_handler():
    machine = StateMachine()
    seen = []
    machine.register_handlers(WheelState.CELEBRATING,
                              enter=lambda: seen.append(machine.get_data('winner')))
    machine.transition_to(WheelState.CELEBRATING, winner="Pizza")
    assert seen == ["Pizza"]

    machine.clear_data()
    assert machine.get_data('winner', 'none') == 'none'
