"""
Core wheel modules
"""

from lucky_wheel.core.options import Option, OptionList
from lucky_wheel.core.scheduler import SpinScheduler
from lucky_wheel.core.state_machine import StateMachine
from lucky_wheel.core.timers import PeriodicTimer
from lucky_wheel.core.trajectory import RotationTrajectory, plan_trajectory, slice_at_pointer

__all__ = [
    'Option', 'OptionList', 'SpinScheduler', 'StateMachine', 'PeriodicTimer',
    'RotationTrajectory', 'plan_trajectory', 'slice_at_pointer',
]
