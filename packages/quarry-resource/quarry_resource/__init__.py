"""quarry-resource — Resource types, stacks, inventories and recipes."""
from quarry_resource.inventory import Inventory
from quarry_resource.recipe import Recipe
from quarry_resource.types import CapacityViolation, ResourceStack, ResourceType

__all__ = [
    "CapacityViolation",
    "Inventory",
    "Recipe",
    "ResourceStack",
    "ResourceType",
]
