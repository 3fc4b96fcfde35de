"""Logger helper for plainyaml.

The library only creates loggers; it never installs handlers. Enable
output from an application with, for example::

    logging.getLogger("plainyaml").setLevel(logging.DEBUG)

"""

from __future__ import annotations

import logging

_ROOT = "plainyaml"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``plainyaml``.

    Example:
        >>> get_logger("mymodule").name
        'plainyaml.mymodule'
        >>> get_logger("plainyaml.parser").name
        'plainyaml.parser'
    """
    if not (name == _ROOT or name.startswith(_ROOT + ".")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
