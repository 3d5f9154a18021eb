"""Selector interactivo con filtro fuzzy (prompt_toolkit + rapidfuzz).

Modelo productor/consumidor:
- un hilo productor empuja los candidatos en una `queue.Queue` acotada y
  termina con un centinela
- el bucle de UI drena la cola antes de cada render y vuelve a rankear con
  cada tecla, así que el orden de llegada no cambia el resultado

La UI es dueña del estado de selección (`PickerState`). Enter confirma,
Escape/Ctrl-C devuelven `None` (sin selección).
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from queue import Empty, Full, Queue
from typing import Callable, Iterable, Sequence

from prompt_toolkit.application import Application
from prompt_toolkit.application.current import get_app
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.layout.processors import BeforeInput
from prompt_toolkit.styles import Style
from rapidfuzz import fuzz
from rapidfuzz.utils import default_process

from core.domain.models import LicenseSummary
from core.log import get_logger

logger = get_logger(__name__)

# Marca de fin de stream del productor.
_DONE = object()

_PUT_TIMEOUT_SECONDS = 0.05

_STYLE = Style.from_dict(
    {
        "prompt": "ansicyan bold",
        "status": "ansibrightblack",
        "cursor": "reverse",
    }
)


def is_subsequence(query: str, text: str) -> bool:
    """True si los caracteres de `query` aparecen en orden dentro de `text`."""

    it = iter(text)
    return all(ch in it for ch in query)


def rank_labels(query: str, labels: Sequence[str]) -> list[int]:
    """Índices de `labels` que casan con `query`, mejor puntuación primero.

    - query vacía: todos, en orden de llegada
    - si no: subsecuencia case-insensitive, ordenado por `fuzz.WRatio`
      (empates conservan el orden de llegada)
    """

    needle = query.strip().lower()
    if not needle:
        return list(range(len(labels)))

    scored: list[tuple[float, int]] = []
    for index, label in enumerate(labels):
        if not is_subsequence(needle, label.lower()):
            continue
        score = fuzz.WRatio(needle, label, processor=default_process)
        scored.append((score, index))
    scored.sort(key=lambda pair: -pair[0])
    return [index for _, index in scored]


@dataclass
class PickerState:
    """Estado del selector, propiedad exclusiva del bucle de UI."""

    items: list[LicenseSummary] = field(default_factory=list)
    query: str = ""
    matches: list[int] = field(default_factory=list)
    cursor: int = 0
    done: bool = False

    def drain(self, queue: Queue) -> int:
        """Consume sin bloquear lo que haya en la cola; devuelve cuántos llegaron."""

        added = 0
        while True:
            try:
                item = queue.get_nowait()
            except Empty:
                break
            if item is _DONE:
                self.done = True
                continue
            self.items.append(item)
            added += 1
        if added:
            self._refilter()
        return added

    def set_query(self, query: str) -> None:
        self.query = query
        self.cursor = 0
        self._refilter()

    def move(self, delta: int) -> None:
        if not self.matches:
            self.cursor = 0
            return
        self.cursor = max(0, min(len(self.matches) - 1, self.cursor + delta))

    def selected(self) -> LicenseSummary | None:
        if not self.matches:
            return None
        return self.items[self.matches[self.cursor]]

    def visible(self, rows: int) -> list[tuple[bool, LicenseSummary]]:
        """Filas a pintar, desplazadas para que el cursor quede visible."""

        rows = max(1, rows)
        start = max(0, self.cursor - rows + 1)
        window = self.matches[start : start + rows]
        return [(start + offset == self.cursor, self.items[i]) for offset, i in enumerate(window)]

    def _refilter(self) -> None:
        self.matches = rank_labels(self.query, [item.label for item in self.items])
        self.move(0)


def _put(queue: Queue, item: object, stop: threading.Event) -> bool:
    while not stop.is_set():
        try:
            queue.put(item, timeout=_PUT_TIMEOUT_SECONDS)
            return True
        except Full:
            continue
    return False


def produce_candidates(
    items: Iterable[LicenseSummary],
    queue: Queue,
    stop: threading.Event,
    notify: Callable[[], None] | None = None,
) -> None:
    """Empuja `items` y el centinela; se rinde si la UI activa `stop`.

    `notify` se llama tras cada put (p.ej. `Application.invalidate`, thread-safe).
    """

    count = 0
    for item in items:
        if not _put(queue, item, stop):
            logger.debug("Producer stopped after %d candidates", count)
            return
        count += 1
        if notify:
            notify()
    if _put(queue, _DONE, stop) and notify:
        notify()
    logger.debug("Producer finished: %d candidates", count)


def start_producer(
    items: Iterable[LicenseSummary],
    queue: Queue,
    stop: threading.Event,
    notify: Callable[[], None] | None = None,
) -> threading.Thread:
    thread = threading.Thread(
        target=produce_candidates,
        args=(list(items), queue, stop, notify),
        name="license-picker-producer",
        daemon=True,
    )
    thread.start()
    return thread


def _build_application(state: PickerState, queue: Queue) -> Application:
    query = Buffer(multiline=False, on_text_changed=lambda buf: state.set_query(buf.text))

    def list_fragments() -> list[tuple[str, str]]:
        rows = get_app().output.get_size().rows - 2
        fragments: list[tuple[str, str]] = []
        for is_cursor, item in state.visible(rows):
            if is_cursor:
                fragments.append(("class:cursor", f"> {item.label}\n"))
            else:
                fragments.append(("", f"  {item.label}\n"))
        return fragments

    def status_fragments() -> list[tuple[str, str]]:
        loading = "" if state.done else " (loading...)"
        return [("class:status", f"  {len(state.matches)}/{len(state.items)}{loading}")]

    kb = KeyBindings()

    @kb.add("enter")
    def _accept(event) -> None:
        state.drain(queue)
        choice = state.selected()
        if choice is not None:
            event.app.exit(result=choice)

    @kb.add("c-c")
    @kb.add("escape", eager=True)
    def _cancel(event) -> None:
        event.app.exit(result=None)

    @kb.add("up")
    @kb.add("c-p")
    def _up(event) -> None:
        state.move(-1)

    @kb.add("down")
    @kb.add("c-n")
    def _down(event) -> None:
        state.move(1)

    query_window = Window(
        BufferControl(buffer=query, input_processors=[BeforeInput("> ", style="class:prompt")]),
        height=1,
    )
    layout = Layout(
        HSplit(
            [
                query_window,
                Window(FormattedTextControl(status_fragments), height=1),
                Window(FormattedTextControl(list_fragments)),
            ]
        ),
        focused_element=query_window,
    )
    return Application(
        layout=layout,
        key_bindings=kb,
        style=_STYLE,
        full_screen=True,
        refresh_interval=0.1,
        before_render=lambda app: state.drain(queue),
    )


class FuzzyPicker:
    """`Picker` interactivo para `core.services.selector.select_license`."""

    def __init__(self, *, queue_size: int = 256) -> None:
        self._queue_size = queue_size

    async def __call__(self, summaries: Sequence[LicenseSummary]) -> LicenseSummary | None:
        queue: Queue = Queue(maxsize=self._queue_size)
        stop = threading.Event()
        state = PickerState()

        app = _build_application(state, queue)
        producer = start_producer(summaries, queue, stop, notify=app.invalidate)
        try:
            result = await app.run_async()
        finally:
            stop.set()
            producer.join(timeout=1.0)

        if result is None:
            logger.debug("Picker closed without selection")
        return result
