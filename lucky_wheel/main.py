#!/usr/bin/env python3
"""
LUCKY WHEEL - Spin to Decide
============================
Entry point for the app.

Run: python -m lucky_wheel.main  (or the `lucky-wheel` script)
"""

import asyncio
import os
import sys

from lucky_wheel.config import APP_TITLE


def main():
    """Main entry point"""
    print(f"\n{'='*60}")
    print(f"  {APP_TITLE}")
    print(f"{'='*60}\n")

    from lucky_wheel.core.app import WheelApp
    from lucky_wheel.audio.sound_manager import get_sound_manager
    from lucky_wheel.ai.service import SuggestionService
    from lucky_wheel.ai.providers.openrouter import OpenRouterProvider

    # Audio is acquired on first use and degrades to silence
    sound_manager = get_sound_manager()

    # Suggestions are optional - without a key the fallback text is used
    api_key = os.environ.get('OPENROUTER_API_KEY', '').strip().strip('"').strip("'")
    if api_key:
        print(f"API Key loaded: {api_key[:8]}...{api_key[-4:]}")
        suggestions = SuggestionService(OpenRouterProvider(api_key=api_key))
    else:
        print("OPENROUTER_API_KEY not set: suggestions use offline text")
        suggestions = SuggestionService()

    app = WheelApp(sound_manager=sound_manager, suggestions=suggestions)

    print("\nReady! TAB or click the wheel to spin, F2 toggles sound, ESC quits.\n")

    try:
        asyncio.run(app.run())
    except KeyboardInterrupt:
        print("\nStopped by user.")
    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == '--help':
        print("Lucky Wheel - spin to decide")
        print("\nUsage: lucky-wheel")
        print("\nControls:")
        print("  Type + Enter  - Add option")
        print("  Delete        - Remove last option")
        print("  Tab / Click   - Spin")
        print("  F2            - Toggle sound")
        print("  F3            - Replace options with suggestions for the typed topic")
        print("  Escape        - Close result / Quit")
    else:
        main()
