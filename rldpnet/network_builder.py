"""Builder that initialises stacked network layers in one step."""

from abc import ABC, abstractmethod
from typing import Any, Tuple

_MAX_LAYERS = 4


class DeferredInitialization(ABC):
    """A network layer whose construction is postponed until build time."""

    @abstractmethod
    def initialize(self) -> Any:
        """Construct the layer and return it."""


class NetworkBuilder:
    """Collects deferred layers and initialises them together."""

    def __init__(self, *layers: DeferredInitialization) -> None:
        self._layers: Tuple[DeferredInitialization, ...] = tuple(layers)

    def with_layer(self, deferred: DeferredInitialization) -> "NetworkBuilder":
        """Return a new builder with ``deferred`` stacked on top."""
        return NetworkBuilder(*self._layers, deferred)

    def build(self) -> Any:
        """Initialise all layers, topmost first.

        One layer yields its component; several yield a tuple in the order
        the layers were added.
        """
        if not self._layers:
            raise ValueError("no network layers to build")
        if len(self._layers) > _MAX_LAYERS:
            raise ValueError(f"at most {_MAX_LAYERS} network layers are supported")

        initialized = [layer.initialize() for layer in reversed(self._layers)]
        initialized.reverse()
        if len(initialized) == 1:
            return initialized[0]
        return tuple(initialized)