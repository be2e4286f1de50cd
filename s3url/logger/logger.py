""" This module defines the Logger used throughout s3url """
from typing import Callable, Optional

from colorama import Style

from .level import Level


class Logger:
    """ Logger writes levelled, namespaced key=value lines through print_fn """

    def __init__(
        self,
        namespace: Optional[str] = None,
        min_level: Level = Level.INFO,
        print_fn: Callable[[str], None] = print,
        context: Optional[dict] = None,
    ):
        self.namespace = namespace
        self.min_level = min_level
        self.print_fn = print_fn
        self.context = context or {}
        self.silent = False

    def enabled_for(self, level: Optional[Level]) -> bool:
        """ Whether a message at the given level would be written """
        return level is not None and level >= self.min_level and not self.silent

    def log(self, level: Optional[Level] = None, namespace: Optional[str] = None, message: str = "", **context):
        """ Writes one line made of the level tag, namespace, message and context """
        if not self.enabled_for(level):
            return

        parts = ["[" + level.color + str(level) + Style.RESET_ALL + "]"]
        namespace = namespace or self.namespace
        if namespace:
            parts.append(Style.BRIGHT + namespace + ":" + Style.RESET_ALL)
        if message:
            parts.append(message)

        key_fmt = level.context_key_color + "{}" + Style.RESET_ALL + "={}"
        parts.extend(key_fmt.format(k, v) for k, v in {**self.context, **context}.items())
        self.print_fn(" ".join(parts))

    def _derive(self, namespace, context) -> "Logger":
        derived = Logger(namespace=namespace, min_level=self.min_level, print_fn=self.print_fn, context=context)
        derived.silent = self.silent
        return derived

    def with_namespace(self, namespace: str) -> "Logger":
        """ Returns a copy of this logger writing under a different namespace """
        return self._derive(namespace, self.context)

    def with_context(self, **context) -> "Logger":
        """ Returns a copy of this logger that always appends the given context """
        return self._derive(self.namespace, {**self.context, **context})

    def verbose(self, message, **context):
        """ Logs the given message with the verbose level """
        self.log(level=Level.VERBOSE, message=message, **context)

    def debug(self, message, **context):
        """ Logs the given message with the debug level """
        self.log(level=Level.DEBUG, message=message, **context)

    def info(self, message, **context):
        """ Logs the given message with the info level """
        self.log(level=Level.INFO, message=message, **context)

    def warn(self, message, **context):
        """ Logs the given message with the warn level """
        self.log(level=Level.WARN, message=message, **context)

    def error(self, message, **context):
        """ Logs the given message with the error level """
        self.log(level=Level.ERROR, message=message, **context)

    def critical(self, message, **context):
        """ Logs the given message with the critical level """
        self.log(level=Level.CRITICAL, message=message, **context)

    def set_silence(self, silence: bool):
        """ Turns output off (or back on) without changing min_level """
        self.silent = silence
