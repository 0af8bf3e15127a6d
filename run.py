# run.py
from __future__ import annotations

import argparse
import logging

from eventdispatcher import DispatchConfig, Event, EventDispatcher, ManualScheduler


def print_event(label: str):
    def listener(e: Event) -> None:
        print(f"[{label}] {e.type} origin={e.origin} current_target={e.current_target}", flush=True)

    return listener


def main() -> None:
    parser = argparse.ArgumentParser(description="Walk an event through a button -> window dispatcher chain")
    parser.add_argument("--stop", action="store_true", help="First button listener calls stop_propagation()")
    parser.add_argument("--no-interrupt", action="store_true", help="stop_propagation() only blocks bubbling")
    parser.add_argument("--lifo", action="store_true", help="Release queued events newest first")
    parser.add_argument("--delay", type=int, default=250, help="Delay for the deferred event (ms)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG shows dispatcher internals)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(name)s %(levelname)s %(message)s")

    config = DispatchConfig(
        stop_interrupts_listeners=not args.no_interrupt,
        queue_release="lifo" if args.lifo else "fifo",
    )
    scheduler = ManualScheduler()

    window = EventDispatcher(current_target="window", scheduler=scheduler, config=config)
    button = EventDispatcher(current_target="button", parent=window, scheduler=scheduler, config=config)

    def first_click(e: Event) -> None:
        print_event("button#1")(e)
        if args.stop:
            e.stop_propagation()

    button.add_event_listener("click", first_click)
    button.add_event_listener("click", print_event("button#2"))
    button.add_event_listener("ready", print_event("button"))
    window.add_event_listener("click", print_event("window"))
    window.add_event_listener("ready", print_event("window"))

    # Held until "click" goes out on the button.
    button.queue_event_dispatch("click", Event("ready", origin="boot", bubbles=True))
    button.queue_event_dispatch("click", Event("ready", origin="late", bubbles=True))

    print("--- dispatch click ---", flush=True)
    button.dispatch_event(Event("click", origin="mouse", bubbles=True))

    print(f"--- defer click by {args.delay}ms ---", flush=True)
    button.defer_event_dispatch(Event("click", origin="timer", bubbles=True), args.delay)
    scheduler.advance(args.delay)


if __name__ == "__main__":
    main()
