from __future__ import annotations

from typing import Type, TypeVar

from esper import World

T = TypeVar("T")


def singleton(world: World, component_type: Type[T]) -> T:
    """Return the single instance of component_type registered in the world."""
    for _, component in world.get_component(component_type):
        return component
    raise RuntimeError(f"{component_type.__name__} not found")


def singleton_entity(world: World, component_type: type) -> int:
    for entity, _ in world.get_component(component_type):
        return entity
    raise RuntimeError(f"{component_type.__name__} not found")
