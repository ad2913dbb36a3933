"""
Dependency Injection Container.

This module provides a simple DI container for managing interface implementations.
"""

from typing import Any, Callable, Dict, Type, TypeVar

from core.logger import logger

T = TypeVar("T")


class Container:
    """
    Simple Dependency Injection Container.

    Supports:
    - Singleton instances (register)
    - Factory functions (register_factory)
    - Interface resolution (resolve)
    """

    _instances: Dict[Type, Any] = {}
    _providers: Dict[Type, Callable[[], Any]] = {}
    _initialized: bool = False

    @classmethod
    def register(cls, interface: Type[T], instance: Any) -> None:
        """
        Register a singleton instance for an interface.

        Args:
            interface: The interface type (e.g., IRequestGateway)
            instance: The implementation instance
        """
        cls._instances[interface] = instance

    @classmethod
    def register_factory(cls, interface: Type[T], factory: Callable[[], T]) -> None:
        """
        Register a factory function for an interface.
        Factory is called each time resolve() is called.
        """
        cls._providers[interface] = factory

    @classmethod
    def resolve(cls, interface: Type[T]) -> T:
        """
        Resolve an interface to its implementation.

        Raises:
            KeyError: If no implementation is registered for the interface
        """
        if interface in cls._instances:
            return cls._instances[interface]
        if interface in cls._providers:
            return cls._providers[interface]()
        raise KeyError(f"No provider registered for {interface.__name__}")

    @classmethod
    def is_registered(cls, interface: Type[T]) -> bool:
        return interface in cls._instances or interface in cls._providers

    @classmethod
    def clear(cls) -> None:
        """Clear all registrations (useful for testing)."""
        cls._instances.clear()
        cls._providers.clear()
        cls._initialized = False

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def _mark_initialized(cls) -> None:
        cls._initialized = True


def bootstrap_container() -> None:
    """
    Initialize the dependency injection container.

    Registers all interface implementations:
    - IRequestGateway -> RequestGateway (configured base URL)
    - IRecordingProvider -> LocalRecordingProvider
    - IAudioPlayer -> SubprocessAudioPlayer
    - SightGuideService -> SightGuideService (with injected dependencies)

    Idempotent: calling it again after a successful bootstrap has no effect.
    """
    if Container.is_initialized():
        return

    logger.info("Bootstrapping dependency injection container...")

    try:
        from interfaces.audio_player import IAudioPlayer
        from interfaces.recording_provider import IRecordingProvider
        from interfaces.request_gateway import IRequestGateway

        from core.dependencies import validate_dependencies
        from infrastructure.audio.player import get_audio_player
        from infrastructure.audio.recordings import get_recording_provider
        from infrastructure.http.gateway import get_request_gateway

        from services.sightguide import SightGuideService, get_sightguide_service

        # Playback is optional for the rest of the client: warn only
        validate_dependencies(strict=False)

        Container.register_factory(IAudioPlayer, get_audio_player)
        logger.info("Registered IAudioPlayer -> SubprocessAudioPlayer (factory)")

        def create_request_gateway():
            return get_request_gateway(audio_player=Container.resolve(IAudioPlayer))

        Container.register_factory(IRequestGateway, create_request_gateway)
        logger.info("Registered IRequestGateway -> RequestGateway (factory)")

        Container.register_factory(IRecordingProvider, get_recording_provider)
        logger.info("Registered IRecordingProvider -> LocalRecordingProvider (factory)")

        def create_sightguide_service():
            return get_sightguide_service(
                gateway=Container.resolve(IRequestGateway),
                recording_provider=Container.resolve(IRecordingProvider),
            )

        Container.register_factory(SightGuideService, create_sightguide_service)
        logger.info("Registered SightGuideService with DI (factory)")

        Container._mark_initialized()
        logger.info("Dependency injection container bootstrapped successfully")

    except Exception as e:
        logger.error(f"Failed to bootstrap container: {e}")
        logger.exception("Container bootstrap error details:")
        raise


def get_request_gateway():
    """
    Get IRequestGateway implementation from container.

    Returns:
        IRequestGateway implementation
    """
    from interfaces.request_gateway import IRequestGateway

    if not Container.is_initialized():
        bootstrap_container()

    return Container.resolve(IRequestGateway)


def get_sightguide_service():
    """
    Get SightGuideService from container.

    Returns:
        SightGuideService with injected dependencies
    """
    from services.sightguide import SightGuideService

    if not Container.is_initialized():
        bootstrap_container()

    return Container.resolve(SightGuideService)
