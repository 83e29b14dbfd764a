"""
Placeable items that live on the board next to the snake.

New kinds are added by subclassing Entity; the class itself is then a
valid factory for SnakeGame.generate_entity:

    @dataclass
    class Bomb(Entity):
        kind: ClassVar[str] = "bomb"
        damage: int = 1

    game.generate_entity(Bomb)
"""

from dataclasses import dataclass
from typing import Callable, ClassVar, Optional, Tuple, Type, TypeVar

E = TypeVar("E", bound="Entity")


@dataclass
class Entity:
    """
    Base class for anything other than the snake that sits on a cell.

    Attributes:
        x, y: board coordinates
        kind: short tag identifying the concrete variant
    """

    x: int
    y: int

    kind: ClassVar[str] = "entity"

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def is_a(self, entity_type: Type["Entity"]) -> bool:
        return isinstance(self, entity_type)

    def downcast(self, entity_type: Type[E]) -> Optional[E]:
        """Return self typed as entity_type, or None when it is another kind."""
        if isinstance(self, entity_type):
            return self
        return None


@dataclass
class Apple(Entity):
    """Food: eating it grows the snake and scores one point."""

    kind: ClassVar[str] = "apple"


EntityFactory = Callable[[int, int], Entity]
