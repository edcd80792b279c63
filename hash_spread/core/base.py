"""
Base classes and interfaces for hash-spread statistics.

This module defines the abstract base class shared by the result records
produced by the analysers. It provides a consistent dictionary and JSON
serialization interface so results can be stored or compared across runs.
"""

import abc
import json
from typing import Any, Dict, Union


class HashStatistic(abc.ABC):
    """
    Abstract base class for immutable hash quality results.

    Subclasses describe one observation of a hash function over a corpus,
    such as the collision figures for a multiplier or the bucket histogram
    of its values. They are read-only once constructed.
    """

    @abc.abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the statistic to a dictionary for serialization.

        Returns:
            A dictionary representation of the statistic.
        """
        pass

    def _base_dict(self) -> Dict[str, Any]:
        """
        Create a dictionary with the attributes common to all statistics.

        Returns:
            A dictionary with base attributes.
        """
        return {"type": self.__class__.__name__}

    @classmethod
    @abc.abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HashStatistic":
        """
        Create a statistic from a dictionary representation.

        Args:
            data: The dictionary containing the statistic.

        Returns:
            A new statistic initialized with the given values.
        """
        pass

    @classmethod
    def _check_type(cls, data: Dict[str, Any]) -> None:
        """
        Helper method to check that a dictionary describes this class.

        Raises:
            TypeError: If the dictionary was produced by another statistic.
        """
        found = data.get("type", cls.__name__)
        if found != cls.__name__:
            raise TypeError(f"Cannot load {found} as {cls.__name__}")

    def serialize(self, format: str = "json") -> Union[str, bytes]:
        """
        Serialize the statistic to a string or bytes.

        Args:
            format: The serialization format ('json' or 'binary').

        Returns:
            The serialized representation of the statistic.

        Raises:
            ValueError: If the format is not supported.
        """
        if format == "json":
            return json.dumps(self.to_dict())
        elif format == "binary":
            return json.dumps(self.to_dict()).encode("utf-8")
        else:
            raise ValueError(f"Unsupported serialization format: {format}")

    @classmethod
    def deserialize(cls, data: Union[str, bytes], format: str = "json") -> Any:
        """
        Deserialize a statistic from a string or bytes.

        Args:
            data: The serialized statistic.
            format: The serialization format ('json' or 'binary').

        Returns:
            A new statistic.

        Raises:
            ValueError: If the format is not supported.
        """
        if format not in ("json", "binary"):
            raise ValueError(f"Unsupported serialization format: {format}")
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return cls.from_dict(json.loads(data))

    def get_stats(self) -> Dict[str, Any]:
        """
        Get a flat dictionary of derived figures for reporting.

        Derived classes extend this with their own figures while calling
        super().get_stats() to include the base attributes.
        """
        return {"type": self.__class__.__name__}
