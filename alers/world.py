"""Entities, the component kinds they take part in, and the commands that spawn and kill them."""

from __future__ import annotations

import abc
import queue
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Type, Union

from alers.ids import next_id


class Spawnable(abc.ABC):
    """An entity that can live in a world."""

    @abc.abstractmethod
    def on_spawn(self) -> None:
        """Called once when the entity enters the world."""

    @abc.abstractmethod
    def on_kill(self) -> None:
        """Called once when the entity leaves the world."""

    @abc.abstractmethod
    def id(self) -> int:
        """Key the entity is stored under."""


class Tickable(abc.ABC):
    """A component advanced by the game loop."""

    @abc.abstractmethod
    def fixed_tick(self, delta_time: float) -> None:
        """Advance by one fixed step."""

    @abc.abstractmethod
    def tick(self, delta_time: float) -> None:
        """Advance by one frame."""


class Inputable(abc.ABC):
    """A component that receives input events."""

    @abc.abstractmethod
    def input(self, inputs: List[Any]) -> None:
        """Handle the events gathered since the last frame."""


@dataclass
class SpawnCommand:
    """Request to put an entity into the world."""

    entity: Any
    type_id: type = field(init=False)
    entity_key: int = field(init=False)

    def __post_init__(self) -> None:
        self.type_id = type(self.entity)
        self.entity_key = self.entity.id()


@dataclass(frozen=True)
class KillCommand:
    """Request to take an entity out of the world."""

    entity_key: int


WorldCommand = Union[SpawnCommand, KillCommand]


@dataclass(frozen=True)
class _CommandSender:
    _queue: "queue.SimpleQueue[WorldCommand]"

    def send(self, command: WorldCommand) -> None:
        """Queue a command for the next resolve_world_commands call."""
        self._queue.put(command)


class World:
    """Owns entities and knows which component kinds each entity type provides."""

    def __init__(self):
        self._entities: Dict[int, Any] = {}
        self._component_to_entity: Dict[type, Dict[int, None]] = {}
        self._component_index: Dict[type, List[type]] = {}
        self._entities_meta: Dict[int, type] = {}
        self._commands: "queue.SimpleQueue[WorldCommand]" = queue.SimpleQueue()

    def gen_entity_key(self) -> int:
        """A key not used by any other entity."""
        return next_id()

    def register_components(self, impl_type: type, component_types: Iterable[type]) -> None:
        """Declare which component kinds entities of impl_type take part in."""
        entry = self._component_index.setdefault(impl_type, [])
        entry.extend(component_types)

    def _is_wired(self, impl_type: type, entity: Any, component_type: type) -> bool:
        return component_type in self._component_index.get(impl_type, ()) and isinstance(
            entity, component_type
        )

    def spawn(self, command: SpawnCommand) -> None:
        """Store the entity, index its components and call its on_spawn."""
        if not self._is_wired(command.type_id, command.entity, Spawnable):
            raise TypeError("Spawnable is not wired")
        key = command.entity_key
        self._entities[key] = command.entity
        self._entities_meta[key] = command.type_id
        for component_type in self._component_index.get(command.type_id, ()):
            self._component_to_entity.setdefault(component_type, {})[key] = None
        command.entity.on_spawn()

    def remove(self, command: KillCommand) -> Optional[Any]:
        """Drop the entity, calling its on_kill; returns it, or None if unknown."""
        key = command.entity_key
        impl_type = self._entities_meta.pop(key, None)
        if impl_type is not None:
            for component_type in self._component_index.get(impl_type, ()):
                self._component_to_entity.get(component_type, {}).pop(key, None)

        entity = self._entities.get(key)
        if entity is None:
            return None
        if not self._is_wired(type(entity), entity, Spawnable):
            raise TypeError("Spawnable is not wired")
        entity.on_kill()
        return self._entities.pop(key)

    def visit(self, component_type: type, visitor: Union[Callable[[Any], None], Any]) -> None:
        """Hand every live entity providing component_type to the visitor."""
        call = getattr(visitor, "visit", visitor)
        keys = list(self._component_to_entity.get(component_type, {}))
        for key in keys:
            entity = self._entities.get(key)
            if entity is None or not isinstance(entity, component_type):
                continue
            call(entity)

    def resolve_world_commands(self) -> None:
        """Carry out every command queued so far, in order."""
        pending: List[WorldCommand] = []
        while True:
            try:
                pending.append(self._commands.get_nowait())
            except queue.Empty:
                break
        for command in pending:
            if isinstance(command, SpawnCommand):
                self.spawn(command)
            elif isinstance(command, KillCommand):
                self.remove(command)
            else:
                raise TypeError(f"unknown world command {command!r}")

    def command_sender(self) -> _CommandSender:
        """A handle that queues commands for this world."""
        return _CommandSender(self._commands)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, key: object) -> bool:
        return key in self._entities