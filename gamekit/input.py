"""Keyboard and mouse button state tracking with per-frame transitions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Iterable, Iterator

from gamekit.vectors import Val2D

__all__ = [
    "Keys",
    "State",
    "InputState",
    "InputDevice",
    "KeyboardInput",
    "MouseInput",
    "InputDevices",
]


class Keys(IntEnum):
    """Virtual key codes; members sharing a code are aliases."""

    KEY_CODE = 0x0000FFFF
    MODIFIERS = 0xFFFF0000
    NONE = 0x00
    L_BUTTON = 0x01
    R_BUTTON = 0x02
    CANCEL = 0x03
    M_BUTTON = 0x04
    X_BUTTON1 = 0x05
    X_BUTTON2 = 0x06
    BACK = 0x08
    TAB = 0x09
    LINE_FEED = 0x0A
    CLEAR = 0x0C
    RETURN = 0x0D
    ENTER = 0x0D
    SHIFT_KEY = 0x10
    CONTROL_KEY = 0x11
    MENU = 0x12
    PAUSE = 0x13
    CAPITAL = 0x14
    CAPS_LOCK = 0x14
    KANA_MODE = 0x15
    HANGUEL_MODE = 0x15
    HANGUL_MODE = 0x15
    JUNJA_MODE = 0x17
    FINAL_MODE = 0x18
    HANJA_MODE = 0x19
    KANJI_MODE = 0x19
    ESCAPE = 0x1B
    IME_CONVERT = 0x1C
    IME_NONCONVERT = 0x1D
    IME_ACCEPT = 0x1E
    IME_ACEEPT = 0x1E
    IME_MODE_CHANGE = 0x1F
    SPACE = 0x20
    PRIOR = 0x21
    PAGE_UP = 0x21
    NEXT = 0x22
    PAGE_DOWN = 0x22
    END = 0x23
    HOME = 0x24
    LEFT = 0x25
    UP = 0x26
    RIGHT = 0x27
    DOWN = 0x28
    SELECT = 0x29
    PRINT = 0x2A
    EXECUTE = 0x2B
    SNAPSHOT = 0x2C
    PRINT_SCREEN = 0x2C
    INSERT = 0x2D
    DELETE = 0x2E
    HELP = 0x2F
    D0 = 0x30
    D1 = 0x31
    D2 = 0x32
    D3 = 0x33
    D4 = 0x34
    D5 = 0x35
    D6 = 0x36
    D7 = 0x37
    D8 = 0x38
    D9 = 0x39
    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A
    L_WIN = 0x5B
    R_WIN = 0x5C
    APPS = 0x5D
    SLEEP = 0x5F
    NUM_PAD0 = 0x60
    NUM_PAD1 = 0x61
    NUM_PAD2 = 0x62
    NUM_PAD3 = 0x63
    NUM_PAD4 = 0x64
    NUM_PAD5 = 0x65
    NUM_PAD6 = 0x66
    NUM_PAD7 = 0x67
    NUM_PAD8 = 0x68
    NUM_PAD9 = 0x69
    MULTIPLY = 0x6A
    ADD = 0x6B
    SEPARATOR = 0x6C
    SUBTRACT = 0x6D
    DECIMAL = 0x6E
    DIVIDE = 0x6F
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    F13 = 0x7C
    F14 = 0x7D
    F15 = 0x7E
    F16 = 0x7F
    F17 = 0x80
    F18 = 0x81
    F19 = 0x82
    F20 = 0x83
    F21 = 0x84
    F22 = 0x85
    F23 = 0x86
    F24 = 0x87
    NUM_LOCK = 0x90
    SCROLL = 0x91
    L_SHIFT_KEY = 0xA0
    R_SHIFT_KEY = 0xA1
    L_CONTROL_KEY = 0xA2
    R_CONTROL_KEY = 0xA3
    L_MENU = 0xA4
    R_MENU = 0xA5
    BROWSER_BACK = 0xA6
    BROWSER_FORWARD = 0xA7
    BROWSER_REFRESH = 0xA8
    BROWSER_STOP = 0xA9
    BROWSER_SEARCH = 0xAA
    BROWSER_FAVORITES = 0xAB
    BROWSER_HOME = 0xAC
    VOLUME_MUTE = 0xAD
    VOLUME_DOWN = 0xAE
    VOLUME_UP = 0xAF
    MEDIA_NEXT_TRACK = 0xB0
    MEDIA_PREVIOUS_TRACK = 0xB1
    MEDIA_STOP = 0xB2
    MEDIA_PLAY_PAUSE = 0xB3
    LAUNCH_MAIL = 0xB4
    SELECT_MEDIA = 0xB5
    LAUNCH_APPLICATION1 = 0xB6
    LAUNCH_APPLICATION2 = 0xB7
    OEM_SEMICOLON = 0xBA
    OEM1 = 0xBA
    OEMPLUS = 0xBB
    OEMCOMMA = 0xBC
    OEM_MINUS = 0xBD
    OEM_PERIOD = 0xBE
    OEM_QUESTION = 0xBF
    OEM2 = 0xBF
    OEMTILDE = 0xC0
    OEM3 = 0xC0
    OEM_OPEN_BRACKETS = 0xDB
    OEM4 = 0xDB
    OEM_PIPE = 0xDC
    OEM5 = 0xDC
    OEM_CLOSE_BRACKETS = 0xDD
    OEM6 = 0xDD
    OEM_QUOTES = 0xDE
    OEM7 = 0xDE
    OEM8 = 0xDF
    OEM_BACKSLASH = 0xE2
    OEM102 = 0xE2
    PROCESS_KEY = 0xE5
    PACKET = 0xE7
    ATTN = 0xF6
    CRSEL = 0xF7
    EXSEL = 0xF8
    ERASE_EOF = 0xF9
    PLAY = 0xFA
    ZOOM = 0xFB
    NO_NAME = 0xFC
    PA1 = 0xFD
    OEM_CLEAR = 0xFE
    SHIFT = 0x00010000
    CONTROL = 0x00020000
    ALT = 0x00040000


class State(Enum):
    """Per-frame state of one button."""

    NONE = 0
    DOWN = 0b0001
    PRESS = 0b0010
    UP = 0b0100
    RELEASE = 0b1000


_ON_PRESS = {
    State.NONE: State.DOWN,
    State.DOWN: State.PRESS,
    State.PRESS: State.PRESS,
    State.UP: State.DOWN,
    State.RELEASE: State.DOWN,
}

_ON_RELEASE = {
    State.NONE: State.NONE,
    State.DOWN: State.UP,
    State.PRESS: State.UP,
    State.UP: State.RELEASE,
    State.RELEASE: State.RELEASE,
}


@dataclass
class InputState:
    """State of one button, advanced once per frame by :meth:`update`."""

    state: State = State.NONE

    def down(self) -> bool:
        """True only on the frame the button went down."""
        return self.state is State.DOWN

    def press(self) -> bool:
        """True while the button is held, including the first frame."""
        return self.state is State.PRESS or self.down()

    def up(self) -> bool:
        """True only on the frame the button was let go."""
        return self.state is State.UP

    def release(self) -> bool:
        """True while the button is not held after having been pressed."""
        return self.state is State.RELEASE or self.up()

    def update(self, pressed: bool) -> None:
        """Advance the state given whether the button is held this frame."""
        table = _ON_PRESS if pressed else _ON_RELEASE
        self.state = table[self.state]


class InputDevice:
    """A fixed number of buttons; reads return an idle state while locked."""

    def __init__(self, count: int = 1) -> None:
        if count < 1:
            raise ValueError("an input device needs at least one button")
        self._states = [InputState() for _ in range(count)]
        self._locked = False

    @property
    def count(self) -> int:
        return len(self._states)

    @property
    def locked(self) -> bool:
        return self._locked

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        self._locked = False

    def __len__(self) -> int:
        return len(self._states)

    def __getitem__(self, idx: int) -> InputState:
        return self.at(idx)

    def __iter__(self) -> Iterator[InputState]:
        return (self[i] for i in range(len(self._states)))

    def at(self, idx: int) -> InputState:
        """A copy of button ``idx``'s state; raises IndexError when out of range."""
        idx = int(idx)
        if not 0 <= idx < len(self._states):
            raise IndexError("Out of Range!!!")
        if self._locked:
            return InputState()
        return replace(self._states[idx])

    def update(self, raw: Iterable[bool]) -> None:
        """Advance every button; ``raw`` gives one held flag per button.

        Buttons beyond the end of ``raw`` count as not held.
        """
        flags = [bool(v) for v in raw]
        if len(flags) > len(self._states):
            raise ValueError(f"expected at most {len(self._states)} flags, got {len(flags)}")
        flags.extend([False] * (len(self._states) - len(flags)))
        for state, flag in zip(self._states, flags):
            state.update(flag)


class KeyboardInput(InputDevice):
    """The 256 virtual keys, indexed by code or :class:`Keys` member."""

    KEY_COUNT = 256

    def __init__(self) -> None:
        super().__init__(self.KEY_COUNT)

    def update(self, raw: Iterable[int]) -> None:  # type: ignore[override]
        """Advance every key; ``raw`` holds the codes of the keys held now."""
        pressed = {int(code) for code in raw}
        for code in pressed:
            if not 0 <= code < self.KEY_COUNT:
                raise ValueError(f"key code out of range: {code:#x}")
        super().update(code in pressed for code in range(self.KEY_COUNT))


class MouseInput(InputDevice):
    """Eleven mouse buttons plus the cursor position."""

    BUTTON_COUNT = 11

    def __init__(self) -> None:
        super().__init__(self.BUTTON_COUNT)
        self._pos = Val2D(0, 0)

    @property
    def mouse_pos(self) -> Val2D:
        return self._pos

    def update(self, buttons: int, pos: Val2D | tuple[int, int] | None = None) -> None:  # type: ignore[override]
        """Advance every button from the bit mask ``buttons``; bit n is button n.

        Bits above the button count are ignored. ``pos`` replaces the cursor
        position when given.
        """
        super().update((buttons >> i) & 1 for i in range(self.BUTTON_COUNT))
        if pos is not None:
            self._pos = pos if isinstance(pos, Val2D) else Val2D(*pos)


class InputDevices:
    """The keyboard and mouse, updated together once per frame."""

    def __init__(self) -> None:
        self.keyboard = KeyboardInput()
        self.mouse = MouseInput()

    def update(
        self,
        keys: Iterable[int] = (),
        mouse_buttons: int = 0,
        mouse_pos: Val2D | tuple[int, int] | None = None,
    ) -> None:
        self.keyboard.update(keys)
        self.mouse.update(mouse_buttons, mouse_pos)