# app.py
# Driver loop: keys, resizes and ticks in, one repaint per event out.
# Single threaded. The only timer is one pending tick deadline, replaced
# whenever the state machine asks for a new tick.

import logging
import time
from typing import Callable, List, Optional

from rich.console import Console
from rich.live import Live

from .banner import build_banner
from .config import Config
from .errors import BannerError
from .keys import TerminalKeyReader
from .log import setup_logging
from .state import (
    QUIT, TICK, Builder, Effect, Event, SessionState,
    apply, initial_effects, initial_state, key_event, resize_event,
)
from .view import render_view

log = logging.getLogger(__name__)

RESIZE_POLL = 0.25  # seconds between terminal size checks while idle


class BannerApp:
    def __init__(
        self,
        config: Optional[Config] = None,
        console: Optional[Console] = None,
        reader_factory: Optional[Callable] = None,
        builder: Builder = build_banner,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config or Config.from_env()
        self.console = console or Console(highlight=False)
        self.reader_factory = reader_factory or TerminalKeyReader
        self.builder = builder
        self.clock = clock
        self.state: SessionState = initial_state(self.config, builder=builder)
        self.next_tick: Optional[float] = None
        self.running = False
        self.live: Optional[Live] = None

    # ----------------------- Events -----------------------
    def perform(self, effects: List[Effect]) -> None:
        for effect in effects:
            if effect is Effect.QUIT:
                self.running = False
                self.next_tick = None
            elif effect is Effect.SCHEDULE_TICK:
                self.next_tick = self.clock() + self.state.interval

    def dispatch(self, event: Event) -> None:
        self.state, effects = apply(self.state, event, self.builder)
        self.perform(effects)
        if self.running and self.live is not None:
            self.live.update(render_view(self.state), refresh=True)

    def timeout(self) -> float:
        if self.next_tick is None:
            return RESIZE_POLL
        return max(0.0, min(RESIZE_POLL, self.next_tick - self.clock()))

    def check_resize(self) -> None:
        size = self.console.size
        if (size.width, size.height) != self.state.viewport:
            log.debug("viewport %sx%s", size.width, size.height)
            self.dispatch(resize_event(size.width, size.height))

    def step(self, reader) -> None:
        self.check_resize()
        for key in reader.read(self.timeout()):
            self.dispatch(key_event(key))
            if not self.running:
                return
        if self.next_tick is not None and self.clock() >= self.next_tick:
            self.next_tick = None
            self.dispatch(TICK)

    # ----------------------- Loop -----------------------
    def run(self) -> int:
        self.running = True
        self.perform(initial_effects(self.state))
        with self.reader_factory() as reader:
            with Live(
                render_view(self.state),
                console=self.console,
                screen=True,
                auto_refresh=False,
                transient=True,
            ) as live:
                self.live = live
                try:
                    while self.running:
                        self.step(reader)
                except KeyboardInterrupt:
                    self.dispatch(QUIT)
                finally:
                    self.live = None
                    self.next_tick = None
        return 0


def run_app(config: Optional[Config] = None, console: Optional[Console] = None) -> int:
    config = config or Config.from_env()
    console = console or Console(highlight=False)
    setup_logging(config.log_level, console)
    try:
        return BannerApp(config, console).run()
    except (BannerError, OSError) as e:
        log.debug("startup failed", exc_info=True)
        Console(stderr=True, highlight=False).print(f"[red]error:[/red] {e}")
        return 1
