"""Kinematics domain models."""

from driftbox.core.entity import Entity
from driftbox.core.ordered import OrderedCollection, unique_collection
from driftbox.core.vector import Vector2
from driftbox.core.velocity import VelocityState

__all__ = ["Entity", "OrderedCollection", "Vector2", "VelocityState", "unique_collection"]
