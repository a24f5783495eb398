"""
State Machine for the wheel's UI flow
"""

from typing import Dict, Optional, Callable, Any

from lucky_wheel.config import WheelState


class StateMachine:
    """
    Manages wheel states and transitions.
    IDLE -> SPINNING -> CELEBRATING -> IDLE
    """

    def __init__(self):
        self.current_state: WheelState = WheelState.IDLE
        self.previous_state: Optional[WheelState] = None

        # State handlers
        self._enter_handlers: Dict[WheelState, Callable] = {}
        self._exit_handlers: Dict[WheelState, Callable] = {}

        # State data (for passing data between states)
        self.state_data: Dict[str, Any] = {}

    def register_handlers(
        self,
        state: WheelState,
        enter: Optional[Callable] = None,
        exit_handler: Optional[Callable] = None
    ):
        """Register handlers for a state"""
        if enter:
            self._enter_handlers[state] = enter
        if exit_handler:
            self._exit_handlers[state] = exit_handler

    def transition_to(self, new_state: WheelState, **kwargs):
        """
        Transition to a new state.
        Calls exit handler on current state, then enter handler on new state.
        """
        if new_state == self.current_state:
            return

        # Store data for new state
        self.state_data.update(kwargs)

        # Exit current state
        if self.current_state in self._exit_handlers:
            self._exit_handlers[self.current_state]()

        # Update state
        self.previous_state = self.current_state
        self.current_state = new_state

        # Enter new state
        if new_state in self._enter_handlers:
            self._enter_handlers[new_state]()

    def is_state(self, state: WheelState) -> bool:
        """Check if current state matches"""
        return self.current_state == state

    def get_data(self, key: str, default: Any = None) -> Any:
        """Get state data"""
        return self.state_data.get(key, default)

    def clear_data(self):
        """Clear all state data"""
        self.state_data.clear()
