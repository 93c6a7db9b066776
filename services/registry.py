"""
Service Registry - Central management of application services
Lazy loading with named dependencies
"""
from typing import Dict, Any, Callable, List, Optional


class ServiceRegistry:
    """
    Registry for application services.

    Factories are called on first use; names listed in ``dependencies`` are
    resolved from the registry and passed to the factory as keyword arguments.
    """

    def __init__(self):
        self._services: Dict[str, Any] = {}
        self._factories: Dict[str, Callable] = {}
        self._dependencies: Dict[str, List[str]] = {}

    def register(self, name: str, service: Any) -> None:
        """Register a service instance directly."""
        self._services[name] = service

    def register_factory(self, name: str, factory: Callable,
                         dependencies: Optional[List[str]] = None) -> None:
        """
        Register a factory function for lazy service instantiation.

        Args:
            name: Service identifier
            factory: Callable that returns a service instance
            dependencies: Service names passed to the factory by name
        """
        self._factories[name] = factory
        self._dependencies[name] = list(dependencies or [])

    def get(self, name: str, _resolving: Optional[tuple] = None) -> Any:
        """
        Get a service by name, instantiating it on first use.

        Raises:
            ValueError: If the service is not registered
            RuntimeError: If dependencies form a cycle
        """
        if name in self._services:
            return self._services[name]

        if name not in self._factories:
            raise ValueError(f"Service '{name}' is not registered")

        resolving = _resolving or ()
        if name in resolving:
            chain = ' -> '.join(resolving + (name,))
            raise RuntimeError(f"Circular dependency detected: {chain}")

        kwargs = {
            dep: self.get(dep, resolving + (name,))
            for dep in self._dependencies.get(name, [])
        }
        self._services[name] = self._factories[name](**kwargs)
        return self._services[name]

    def has(self, name: str) -> bool:
        return name in self._services or name in self._factories

    def validate_dependencies(self) -> List[str]:
        """Report dependencies that nothing registers."""
        errors = []
        for name, deps in self._dependencies.items():
            for dep in deps:
                if not self.has(dep):
                    errors.append(f"Service '{name}' depends on unregistered '{dep}'")
        return errors

    def reset(self) -> None:
        """Drop instantiated services so factories run again. Used by tests."""
        for name in list(self._services):
            if name in self._factories:
                del self._services[name]

    def list_services(self) -> list:
        all_services = set(self._services.keys()) | set(self._factories.keys())
        return sorted(all_services)
