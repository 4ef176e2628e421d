"""Interface for configuration property readers.

Validators (for example the cron expression validator) receive a reader and a
property name and only ever need the property's string value. Property names
are opaque to this interface; file-backed readers typically use the
``section:key`` form.
"""

import abc

# pylint: disable=too-few-public-methods


class ConfigReader(abc.ABC):
    """Contract for reading string properties from a configuration source."""

    @abc.abstractmethod
    def get_str(self, prop: str, default: str = "") -> str:
        """Return the string value of ``prop``, or ``default`` if it is unset."""
