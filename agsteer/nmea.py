"""Streaming, character-driven NMEA 0183 sentence parser."""

from __future__ import annotations

import re
import string
from enum import Enum, IntEnum, auto
from typing import Callable, Optional

Handler = Callable[["NMEAParser"], None]


class ErrorCode(IntEnum):
    """Reasons a sentence can be rejected."""

    NO_ERROR = 0
    UNEXPECTED_CHAR = 1
    BUFFER_FULL = 2
    TYPE_TOO_LONG = 3
    CRC_ERROR = 4
    INTERNAL_ERROR = 5


class _State(Enum):
    INIT = auto()
    SENT = auto()
    ARG = auto()
    CRCH = auto()
    CRCL = auto()
    CRLFCR = auto()
    CRLFLF = auto()


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?"
    r"|\.\d+(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan))",
    re.ASCII | re.IGNORECASE,
)


def _pad_token(token: str, length: int) -> str:
    return token[:length].ljust(length, "\0")


class NMEAParser:
    """Parse NMEA sentences one character at a time and dispatch them to handlers.

    Handlers are called with the parser as their only argument while the
    completed sentence is still available through :meth:`arg`,
    :meth:`sentence_type` and friends. Once a handler returns, the parser is
    reset and the sentence data is no longer reachable.

    ``error_handler`` is called with the parser when a sentence is rejected;
    :meth:`error` then tells why. ``default_handler`` receives well formed
    sentences that no registered handler claims. ``handle_crc`` switches the
    checksum verification on or off.
    """

    SENTENCE_MAX_SIZE = 90
    TOKEN_LENGTH = 5

    def __init__(self, max_handlers: int) -> None:
        self.max_handlers = max_handlers
        self.error_handler: Optional[Handler] = None
        self.default_handler: Optional[Handler] = None
        self.handle_crc = True
        self._handlers: list[tuple[str, Handler]] = []
        self._computed_crc = 0
        self._got_crc = 0
        self._error = ErrorCode.NO_ERROR
        self._state = _State.INIT
        self._chars: list[str] = []
        self._bounds: list[int] = []
        self.reset()

    def reset(self) -> None:
        """Drop any partial sentence and wait for the next '$'."""
        self._state = _State.INIT
        self._chars = []
        self._bounds = []
        self._error = ErrorCode.NO_ERROR

    def add_handler(self, token: str, handler: Handler) -> bool:
        """Register *handler* for sentences whose type matches *token*.

        Only the first five characters of the token count; '-' matches any
        character. Returns False when the table is full or a matching token is
        already registered.
        """
        if len(self._handlers) >= self.max_handlers:
            return False
        if self._find_handler(token) is not None:
            return False
        self._handlers.append((_pad_token(token, self.TOKEN_LENGTH), handler))
        return True

    def feed(self, data: str | bytes) -> None:
        """Pass every character of *data* to the parser."""
        for char in data:
            self << char

    def __lshift__(self, char: str | int) -> "NMEAParser":
        if isinstance(char, int):
            char = chr(char)
        if len(char) != 1:
            raise ValueError("exactly one character expected")
        state = self._state

        if state is _State.INIT:
            self._error = ErrorCode.NO_ERROR
            if char == "$":
                self._computed_crc = 0
                self._state = _State.SENT
            else:
                self._fail(ErrorCode.UNEXPECTED_CHAR)

        elif state is _State.SENT:
            if char.isascii() and char.isalnum():
                if not self._space_avail():
                    self._fail(ErrorCode.BUFFER_FULL)
                elif len(self._chars) < self.TOKEN_LENGTH:
                    self._chars.append(char)
                    self._computed_crc ^= ord(char) & 0xFF
                else:
                    self._fail(ErrorCode.TYPE_TOO_LONG)
            elif char == ",":
                self._computed_crc ^= ord(char)
                self._bounds.append(len(self._chars))
                self._state = _State.ARG
            elif char == "*":
                self._got_crc = 0
                self._bounds.append(len(self._chars))
                self._state = _State.CRCH
            else:
                self._fail(ErrorCode.UNEXPECTED_CHAR)

        elif state is _State.ARG:
            if not self._space_avail():
                self._fail(ErrorCode.BUFFER_FULL)
            elif char == ",":
                self._computed_crc ^= ord(char)
                self._bounds.append(len(self._chars))
            elif char == "*":
                self._got_crc = 0
                self._bounds.append(len(self._chars))
                self._state = _State.CRCH
            else:
                self._computed_crc ^= ord(char) & 0xFF
                self._chars.append(char)

        elif state is _State.CRCH:
            if char in string.hexdigits:
                self._got_crc |= int(char, 16) << 4
                self._state = _State.CRCL
            else:
                self._fail(ErrorCode.UNEXPECTED_CHAR)

        elif state is _State.CRCL:
            if char in string.hexdigits:
                self._got_crc |= int(char, 16)
                self._state = _State.CRLFCR
            else:
                self._fail(ErrorCode.UNEXPECTED_CHAR)

        elif state is _State.CRLFCR:
            if char == "\r":
                self._state = _State.CRLFLF
            else:
                self._fail(ErrorCode.UNEXPECTED_CHAR)

        elif state is _State.CRLFLF:
            if char == "\n":
                if self.handle_crc and self._got_crc != self._computed_crc:
                    self._fail(ErrorCode.CRC_ERROR)
                else:
                    self._process_sentence()
                self.reset()
            else:
                self._fail(ErrorCode.UNEXPECTED_CHAR)

        else:
            self._fail(ErrorCode.INTERNAL_ERROR)

        return self

    def arg_count(self) -> int:
        """Number of arguments in the current sentence."""
        return max(len(self._bounds) - 1, 0)

    def arg(self, num: int) -> str:
        """Argument *num* as text."""
        start, end = self._arg_span(num)
        return "".join(self._chars[start:end])

    def arg_char(self, num: int) -> Optional[str]:
        """Argument *num* when it is exactly one character, otherwise None."""
        text = self.arg(num)
        return text if len(text) == 1 else None

    def arg_int(self, num: int) -> int:
        """Leading integer of argument *num*; 0 when it has none."""
        match = _INT_PREFIX.match(self.arg(num))
        return int(match.group(1)) if match else 0

    def arg_float(self, num: int) -> float:
        """Leading number of argument *num*; 0.0 when it has none."""
        match = _FLOAT_PREFIX.match(self.arg(num))
        return float(match.group(1)) if match else 0.0

    def sentence_type(self) -> str:
        """The sentence type, such as 'GPGGA'."""
        if not self._chars:
            raise LookupError("no sentence available")
        end = self._bounds[0] if self._bounds else len(self._chars)
        return "".join(self._chars[:end])[: self.TOKEN_LENGTH]

    def type_char(self, index: int) -> str:
        """Character *index* of the sentence type."""
        type_text = self.sentence_type()
        if not 0 <= index < len(type_text):
            raise IndexError(f"type character {index} out of range")
        return type_text[index]

    def error(self) -> ErrorCode:
        """The error being reported; meaningful inside the error handler."""
        return self._error

    def _space_avail(self) -> bool:
        return len(self._chars) < self.SENTENCE_MAX_SIZE - len(self._bounds)

    def _fail(self, code: ErrorCode) -> None:
        self._error = code
        if self.error_handler is not None:
            self.error_handler(self)
        self.reset()

    def _arg_span(self, num: int) -> tuple[int, int]:
        if not 0 <= num < self.arg_count():
            raise IndexError(f"argument {num} out of range")
        return self._bounds[num], self._bounds[num + 1]

    def _find_handler(self, token: str) -> Optional[Handler]:
        wanted = _pad_token(token, self.TOKEN_LENGTH)
        for known, handler in self._handlers:
            if all(a == b or a == "-" or b == "-" for a, b in zip(known, wanted)):
                return handler
        return None

    def _process_sentence(self) -> None:
        type_text = "".join(self._chars[: self._bounds[0]])
        handler = self._find_handler(type_text)
        if handler is not None:
            handler(self)
        elif self.default_handler is not None:
            self.default_handler(self)