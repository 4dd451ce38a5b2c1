# runtime/registries.py
from collections.abc import Callable, Iterable
from typing import Any

from pullstar.config.models import (
    GridRandomModel,
    GridRowsModel,
    GridUnion,
    HeuristicChebyshevModel,
    HeuristicEuclideanModel,
    HeuristicManhattanModel,
    HeuristicOctileModel,
    HeuristicUnion,
    HeuristicZeroModel,
)
from pullstar.domain import heuristics
from pullstar.domain.grid import Cell, Grid
from pullstar.domain.heuristics import Heuristic
from pullstar.runtime.rng import RNGRegistry

HeuristicFactory = Callable[[HeuristicUnion], Heuristic]
GridFactory = Callable[[GridUnion, dict], Grid]

_heuristic_registry: dict[str, HeuristicFactory] = {}
_grid_registry: dict[str, GridFactory] = {}


# ------------------- Heuristic registries ---------------------------


def register_heuristic(kind: str):
    def deco(fn: HeuristicFactory):
        _heuristic_registry[kind] = fn
        return fn

    return deco


def make_heuristic(cfg: HeuristicUnion) -> Heuristic:
    try:
        factory = _heuristic_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown heuristic kind {cfg.kind!r}") from None
    return heuristics.weighted(factory(cfg), cfg.weight)


@register_heuristic("chebyshev")
def _chebyshev(cfg: HeuristicChebyshevModel) -> Heuristic:
    return heuristics.chebyshev


@register_heuristic("manhattan")
def _manhattan(cfg: HeuristicManhattanModel) -> Heuristic:
    return heuristics.manhattan


@register_heuristic("euclidean")
def _euclidean(cfg: HeuristicEuclideanModel) -> Heuristic:
    return heuristics.euclidean


@register_heuristic("octile")
def _octile(cfg: HeuristicOctileModel) -> Heuristic:
    return heuristics.octile


@register_heuristic("zero")
def _zero(cfg: HeuristicZeroModel) -> Heuristic:
    return heuristics.zero


# ------------------- Grid registries ---------------------------


def register_grid(kind: str):
    def deco(fn: GridFactory):
        _grid_registry[kind] = fn
        return fn

    return deco


def make_grid(
    cfg: GridUnion, *, rng: RNGRegistry | None = None, keep_clear: Iterable[Cell] = ()
) -> Grid:
    try:
        factory = _grid_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown grid kind {cfg.kind!r}") from None
    return factory(cfg, {"rng": rng, "keep_clear": tuple(keep_clear)})


@register_grid("rows")
def _rows(cfg: GridRowsModel, deps: dict[str, Any]) -> Grid:
    return Grid.from_rows(cfg.rows)


@register_grid("random")
def _random(cfg: GridRandomModel, deps: dict[str, Any]) -> Grid:
    registry = deps["rng"] or RNGRegistry(0)
    rng = registry.stream("grid", cfg.seed)
    return Grid.random(cfg.width, cfg.height, cfg.density, rng, keep_clear=deps["keep_clear"])
