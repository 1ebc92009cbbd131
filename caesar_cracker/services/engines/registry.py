from typing import Type

from caesar_cracker.models.schemas import AttackType
from caesar_cracker.services.engines.base import AttackEngine


class EngineRegistry:
    """
    Registry for attack engines.

    Manages available attack engines and provides lookup by attack type.
    """

    _engines: dict[AttackType, Type[AttackEngine]] = {}
    _instances: dict[AttackType, AttackEngine] = {}

    @classmethod
    def register(cls, engine_class: Type[AttackEngine]) -> Type[AttackEngine]:
        """
        Register an attack engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class FrequencyAttackEngine(AttackEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.attack_type] = engine_class
        return engine_class

    def get_engine(self, attack_type: AttackType) -> AttackEngine | None:
        """
        Get an engine instance for the specified attack type.

        Args:
            attack_type: The type of attack

        Returns:
            Engine instance or None if not found
        """
        if attack_type not in self._engines:
            return None

        # Lazy instantiation with caching
        if attack_type not in self._instances:
            self._instances[attack_type] = self._engines[attack_type]()

        return self._instances[attack_type]

    def create_engine(self, attack_type: AttackType, **kwargs) -> AttackEngine:
        """
        Build a fresh, uncached engine instance.

        Keyword arguments are passed to the engine constructor, e.g. ``chunk_size``.

        Raises:
            KeyError: if no engine is registered for ``attack_type``
        """
        return self._engines[attack_type](**kwargs)

    def get_all_engines(self) -> list[AttackEngine]:
        """Get all registered engines, in registration order."""
        return [self.get_engine(attack_type) for attack_type in self._engines]

    @classmethod
    def list_registered(cls) -> list[AttackType]:
        """List all registered attack types."""
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, attack_type: AttackType) -> bool:
        return attack_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from caesar_cracker.services.engines import dictionary, frequency  # noqa: F401


# Load engines when module is imported
_load_engines()
