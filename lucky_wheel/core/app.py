"""
Wheel App
=========
Coordinates the option list, the spin scheduler, audio, text suggestions
and the pygame front end on one asyncio loop.
"""

import asyncio
import pygame
from typing import Optional, Set

from lucky_wheel.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, APP_TITLE, DEBUG_FRAMERATE,
    WheelState, WHITE,
)
from lucky_wheel.core.options import Option, OptionList
from lucky_wheel.core.scheduler import SpinScheduler
from lucky_wheel.core.state_machine import StateMachine
from lucky_wheel.core.input_handler import InputHandler


class WheelApp:
    """
    Main application that wires all systems together.

    Owns the IDLE -> SPINNING -> CELEBRATING -> IDLE flow. The scheduler
    only reports back through the completion callback; moving to
    CELEBRATING and playing the fanfare happen here.
    """

    def __init__(self, sound_manager=None, suggestions=None,
                 options: Optional[OptionList] = None,
                 scheduler: Optional[SpinScheduler] = None):
        self.sound_manager = sound_manager
        self.suggestions = suggestions
        self.options = options if options is not None else OptionList.with_defaults()
        self.scheduler = scheduler or SpinScheduler(audio=sound_manager)

        self.state_machine = StateMachine()
        self.input_handler = InputHandler()

        # Result of the last spin
        self.winner: Optional[Option] = None
        self.message = ""

        # Front end (created in run())
        self.screen = None
        self.renderer = None
        self.ui_manager = None
        self.running = False
        self.fps = 0.0

        self._tasks: Set[asyncio.Task] = set()
        self._setup_state_handlers()

    def _setup_state_handlers(self):
        """Register handlers for each wheel state"""
        self.state_machine.register_handlers(WheelState.IDLE, enter=self._enter_idle)
        self.state_machine.register_handlers(WheelState.SPINNING, enter=self._enter_spinning)
        self.state_machine.register_handlers(WheelState.CELEBRATING, enter=self._enter_celebrating)

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def spin(self) -> bool:
        """Start a spin if the wheel is idle and has enough options"""
        if not self.state_machine.is_state(WheelState.IDLE) or not self.options.can_spin:
            return False

        if self.sound_manager:
            self.sound_manager.resume()

        self.winner = None
        self.message = ""
        self.state_machine.transition_to(WheelState.SPINNING)
        if not self.scheduler.request_spin(self.options.snapshot(), self._on_spin_complete):
            self.state_machine.transition_to(WheelState.IDLE)
            return False
        return True

    def _on_spin_complete(self, winner: Option):
        if self.sound_manager:
            self.sound_manager.play_win()
        self.winner = winner
        self.state_machine.transition_to(WheelState.CELEBRATING, winner=winner)

    def close_result(self):
        if self.state_machine.is_state(WheelState.CELEBRATING):
            self.state_machine.transition_to(WheelState.IDLE)

    def toggle_mute(self) -> bool:
        if self.sound_manager is None:
            return True
        return self.sound_manager.toggle_mute()

    def add_option(self, label: str) -> Optional[Option]:
        if not self.state_machine.is_state(WheelState.IDLE):
            return None
        return self.options.add(label)

    def remove_last_option(self) -> bool:
        if not self.state_machine.is_state(WheelState.IDLE) or len(self.options) == 0:
            return False
        return self.options.remove(self.options[len(self.options) - 1].id)

    def request_suggestions(self, topic: str) -> Optional[asyncio.Task]:
        """Replace the options with suggestions on `topic` (in the background)"""
        if self.suggestions is None or not topic.strip():
            return None
        return self._spawn(self._load_suggestions(topic))

    def connect_services(self) -> Optional[asyncio.Task]:
        """Check the suggestion provider in the background"""
        if self.suggestions is None:
            return None
        return self._spawn(self.suggestions.initialize())

    async def _load_suggestions(self, topic: str):
        self._set_status(f"Asking for ideas about {topic!r}...")
        labels = await self.suggestions.generate_options(topic)
        if not self.state_machine.is_state(WheelState.IDLE):
            self._set_status("")
            return
        kept = self.options.replace_all(labels)
        self._set_status(f"Loaded {kept} suggestions" if kept else "No usable suggestions")

    async def _load_congratulation(self, winner: Option):
        message = await self.suggestions.generate_congratulation(winner.label)
        if self.winner is winner:
            self.message = message

    # =========================================================================
    # STATE HANDLERS
    # =========================================================================

    def _enter_idle(self):
        self.winner = None
        self.message = ""
        self.state_machine.clear_data()

    def _enter_spinning(self):
        self._set_status("")

    def _enter_celebrating(self):
        winner = self.state_machine.get_data('winner')
        if self.suggestions is not None and winner is not None:
            self._spawn(self._load_congratulation(winner))

    # =========================================================================
    # MAIN LOOP
    # =========================================================================

    async def run(self):
        """Frame loop; yields to the event loop between frames"""
        from lucky_wheel.graphics.renderer import WheelRenderer
        from lucky_wheel.ui.manager import UIManager

        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(APP_TITLE)
        pygame.key.start_text_input()

        self.renderer = WheelRenderer()
        self.ui_manager = UIManager()
        self.running = True
        self.connect_services()

        loop = asyncio.get_running_loop()
        frame_time = 1.0 / FPS
        last = loop.time()

        try:
            while self.running:
                frame_start = loop.time()
                dt = frame_start - last
                last = frame_start
                self.fps = 1.0 / dt if dt > 0 else 0.0

                self._handle_events()
                if self.input_handler.should_quit():
                    self.running = False
                    break

                self._update()
                self._render()
                pygame.display.flip()

                # Timers and tasks run while we wait for the next frame
                await asyncio.sleep(max(0.0, frame_start + frame_time - loop.time()))
        finally:
            self.shutdown()

    def _handle_events(self):
        """Process pygame events"""
        self.input_handler.update()
        for event in pygame.event.get():
            self.input_handler.process_event(event)

    def _update(self):
        inp = self.input_handler
        state = self.state_machine.current_state

        if state == WheelState.CELEBRATING:
            if inp.is_action_just_pressed('confirm') or inp.is_action_just_pressed('cancel'):
                self.close_result()
            return

        if inp.is_action_just_pressed('mute'):
            self.toggle_mute()

        if state != WheelState.IDLE:
            return

        box = self.ui_manager.input_box
        box.feed(inp.typed_text())
        if inp.is_action_just_pressed('backspace'):
            box.backspace()

        if inp.is_action_just_pressed('confirm') and box.text.strip():
            if self.add_option(box.text):
                box.take()
        elif inp.is_action_just_pressed('suggest') and box.text.strip():
            self.request_suggestions(box.take())
        elif inp.is_action_just_pressed('remove_last'):
            self.remove_last_option()
        elif inp.is_action_just_pressed('cancel'):
            self.running = False
        elif inp.is_action_just_pressed('spin') or (
                inp.is_mouse_clicked() and self.renderer.contains(inp.get_mouse_pos())):
            self.spin()

    def _render(self):
        options = self.options.snapshot()
        self.renderer.render(self.screen, options, self.scheduler.current_angle())

        muted = self.sound_manager.muted if self.sound_manager else True
        self.ui_manager.render(
            self.screen, self.state_machine.current_state, options, muted,
            winner=self.winner, message=self.message
        )

        if DEBUG_FRAMERATE:
            font = pygame.font.Font(None, 24)
            self.screen.blit(font.render(f"FPS: {int(self.fps)}", True, WHITE), (10, 10))

    def _set_status(self, text: str):
        if self.ui_manager is not None:
            self.ui_manager.set_status(text)

    def _spawn(self, coro) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def shutdown(self):
        """Cancel pending work and release pygame"""
        self.scheduler.cancel()
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()

        if self.sound_manager:
            self.sound_manager.cleanup()
        if self.screen is not None:
            pygame.quit()
            self.screen = None
