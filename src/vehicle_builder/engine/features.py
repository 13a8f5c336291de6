"""Feature chain: stacked optional add-ons (Decorator).

Each ``FeatureNode`` wraps an optional inner node:

  WiFi( AssistCamera( SoundSystem(None) ) )

  cost()        = 750 + 200 + 1000               = 1950
  description() = ", Sound System, Assist Camera, Wi-Fi"

Descriptions accumulate innermost first, so the raw description always
starts with the ", " separator.  ``label()`` is the display form without it.
Nodes are frozen; adding a feature means wrapping in a new outer node.
Walking, comparing, hashing and repr are iterative; ``model_dump()`` still
recurses through ``inner``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from vehicle_builder.models.variants import FeatureKind

SEPARATOR = ", "


class FeatureNode(BaseModel):
    """One add-on layered over ``inner``."""

    model_config = ConfigDict(frozen=True)

    kind: FeatureKind
    increment: int = Field(gt=0, description="Cost this layer adds on top of inner")
    inner: FeatureNode | None = None

    def layers(self) -> Iterator[FeatureNode]:
        """Yield every node of the chain, innermost first."""
        chain: list[FeatureNode] = []
        node: FeatureNode | None = self
        while node is not None:
            chain.append(node)
            node = node.inner
        yield from reversed(chain)

    def cost(self) -> int:
        return sum(node.increment for node in self.layers())

    def description(self) -> str:
        return "".join(SEPARATOR + node.kind.value for node in self.layers())

    def labels(self) -> list[str]:
        return [node.kind.value for node in self.layers()]

    def label(self) -> str:
        return self.description().removeprefix(SEPARATOR)

    # Pydantic's generated versions of these recurse through ``inner``.
    def _layer_key(self) -> tuple[tuple[FeatureKind, int], ...]:
        return tuple((node.kind, node.increment) for node in self.layers())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeatureNode):
            return NotImplemented
        return self._layer_key() == other._layer_key()

    def __hash__(self) -> int:
        return hash(self._layer_key())

    def __repr__(self) -> str:
        return f"FeatureNode({self.label()!r}, cost={self.cost()})"

    def __str__(self) -> str:
        return self.label()


def wrap(inner: FeatureNode | None, kind: FeatureKind, cost: int | None = None) -> FeatureNode:
    """Layer *kind* over *inner*.

    *cost* overrides the kind's base increment, e.g. with a per-class quote.
    """
    return FeatureNode(
        kind=kind,
        increment=kind.base_cost if cost is None else cost,
        inner=inner,
    )


def build_chain(
    kinds: Iterable[FeatureKind],
    price: Callable[[FeatureKind], int] | None = None,
) -> FeatureNode | None:
    """Wrap *kinds* in order, so the first kind ends up innermost.

    *price* supplies each layer's increment; base costs otherwise.
    """
    node: FeatureNode | None = None
    for kind in kinds:
        node = wrap(node, kind, cost=price(kind) if price is not None else None)
    return node
