""" This module defines the log levels and the colours used to render them """
import enum

from colorama import Fore, Style

_NAMES = ["verb", "debu", "info", "warn", "erro", "crit"]
_COLORS = [Fore.WHITE, Fore.LIGHTWHITE_EX, Fore.LIGHTBLUE_EX, Fore.YELLOW, Fore.LIGHTRED_EX, Fore.RED]
_KEY_COLORS = [Style.DIM + Fore.WHITE, Style.DIM + Fore.LIGHTWHITE_EX] + _COLORS[2:]


@enum.unique
class Level(enum.IntEnum):
    """ Level orders the severities a message can be logged with """

    VERBOSE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5

    def __str__(self):
        return _NAMES[int(self.value)]

    @property
    def color(self):
        """ The colour of the bracketed level tag """
        return _COLORS[int(self.value)]

    @property
    def context_key_color(self):
        """ The colour of the keys in the key=value context """
        return _KEY_COLORS[int(self.value)]

    @staticmethod
    def from_string(level_str: str):
        """
        Maps a level name such as "debug" or "WARN" onto a Level. Only the
        first four letters are significant; anything unrecognised is INFO
        """
        if not level_str:
            return Level.INFO
        prefix = level_str.lower()[:4]
        if prefix in _NAMES:
            return Level(_NAMES.index(prefix))
        return Level.INFO
