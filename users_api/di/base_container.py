# Standard library imports
from typing import Any, Dict, Type, TypeVar, Union

TypeVarType = TypeVar('TypeVarType')


class BaseContainer:
    """Base dependency injection container holding one instance per key"""

    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}

    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance

    def get(self, interface: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get the instance registered for a type or string key"""
        try:
            return self.instances[interface]
        except KeyError:
            raise ValueError(f"No registration found for {interface}") from None
