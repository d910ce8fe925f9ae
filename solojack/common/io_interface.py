"""
Line-oriented I/O used by the presentation adapters.

An adapter never prints or reads directly; it goes through one of these
interfaces so the same adapter can drive the terminal, a transcript file,
scripted test input or nothing at all.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Union

import aiofiles

PROMPT_MARKER = "[INPUT PROMPT]"
CLEAR_SCREEN = "\033[H\033[2J"


class IOInterface(ABC):
    """
    Where adapter text goes and where player answers come from.

    Only ``output`` and ``input`` are required. ``output_async`` is what the
    async adapters call; file-backed interfaces override it so writes do not
    block the event loop.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Show one message."""

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Read one line of player input."""

    async def output_async(self, message: str) -> None:
        self.output(message)

    def clear(self) -> None:
        """Wipe the display between rounds; a no-op where there is no display."""


class DummyIOInterface(IOInterface):
    """Discards output and answers every prompt with an empty line."""

    def output(self, message: str) -> None:
        pass

    def input(self, prompt: str) -> str:
        return ""


class TestIOInterface(IOInterface):
    """
    Scripted I/O for tests.

    Every message is kept in ``sent_messages`` and every prompt in
    ``prompts``. ``input`` hands out the queued responses in order and raises
    EOFError once they run out, just like a closed stdin.
    """

    __test__ = False

    def __init__(self, responses: Optional[Iterable[str]] = None):
        self.sent_messages: List[str] = []
        self.prompts: List[str] = []
        self.input_responses: List[str] = list(responses or [])

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.input_responses:
            raise EOFError("TestIOInterface has no scripted responses left")
        return self.input_responses.pop(0)

    def add_input(self, *responses: str) -> None:
        self.input_responses.extend(responses)

    @property
    def transcript(self) -> str:
        """All output so far, one message per line."""
        return "\n".join(self.sent_messages)


class ConsoleIOInterface(IOInterface):
    """The terminal: ``print`` for output, ``input`` for answers."""

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)

    def clear(self) -> None:
        print(CLEAR_SCREEN, end="", flush=True)


class LoggingIOInterface(IOInterface):
    """
    Appends everything shown to a transcript file.

    There is nobody to answer prompts, so ``input`` records the prompt with a
    ``[INPUT PROMPT]`` marker and returns an empty answer. Use it for
    simulated rounds only.
    """

    def __init__(self, log_file_path: Union[str, Path]):
        self.log_file_path = Path(log_file_path)

    def output(self, message: str) -> None:
        with self.log_file_path.open("a", encoding="utf-8") as transcript:
            transcript.write(f"{message}\n")

    def input(self, prompt: str) -> str:
        self.output(f"{PROMPT_MARKER} {prompt}")
        return ""

    async def output_async(self, message: str) -> None:
        async with aiofiles.open(
            self.log_file_path, "a", encoding="utf-8"
        ) as transcript:
            await transcript.write(f"{message}\n")
