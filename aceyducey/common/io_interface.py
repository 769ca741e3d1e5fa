"""
This module contains the IOInterface abstract base class and its implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for line-based input/output in the game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get a raw line of input from the user with a prompt."""
        pass


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and
    replays scripted input responses.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def input(self, prompt):
        Return the next scripted response.

    def add_input_response(self, response: str):
        Add a response to the queue.
    """

    __test__ = False

    def __init__(self, responses=None):
        self.sent_messages = []
        self.prompts = []
        self.input_responses = list(responses or [])

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        raise EOFError("No more input responses left in TestIOInterface queue.")

    def add_input_response(self, response: str):
        """Add an input response to the queue."""
        self.input_responses.append(response)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)


class TranscriptIOInterface(IOInterface):
    """
    An IO interface that records a transcript of the game to a file.

    Every message is passed through to the wrapped interface and appended to
    the transcript. Prompts are written together with the response they got.
    """

    def __init__(self, io_interface: IOInterface, transcript_path: str):
        self.io_interface = io_interface
        self.transcript_path = transcript_path

    def _write(self, line: str) -> None:
        with open(self.transcript_path, "a", encoding="utf-8") as transcript:
            transcript.write(line + "\n")

    def output(self, message: str) -> None:
        """Output a message and write it to the transcript."""
        self.io_interface.output(message)
        self._write(message)

    def input(self, prompt: str) -> str:
        """Read a response and write the prompt and response to the transcript."""
        response = self.io_interface.input(prompt)
        self._write(f"{prompt}{response}")
        return response
