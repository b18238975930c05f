from typing import Generic, Callable, TypeVar, Hashable, ClassVar


K = TypeVar("K", bound=Hashable)
T = TypeVar("T")
CallableMap = dict[K, Callable[..., T]]


class TypeAbstractFactory(Generic[K, T]):
    """
    Generic abstract factory that maps keys to constructors. A constructor is
    usually a class, but any callable returning the product type may be
    registered. Subclasses get an isolated registry.
    """

    _registry: ClassVar[CallableMap] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._registry = {}

    @classmethod
    def normalize_key(cls, key: K) -> K:
        """Hook for subclasses that accept several spellings of one key."""
        return key

    @classmethod
    def register(cls, key: K) -> Callable[[Callable[..., T]], Callable[..., T]]:
        """
        Decorator for registering a concrete implementation type or constructor.
        """
        def wrapper(impl: Callable[..., T]) -> Callable[..., T]:
            cls._registry[cls.normalize_key(key)] = impl
            return impl

        return wrapper

    @classmethod
    def register_constructor(cls, key: K, constructor: Callable[..., T]) -> None:
        cls._registry[cls.normalize_key(key)] = constructor

    @classmethod
    def unregister(cls, key: K) -> None:
        cls._registry.pop(cls.normalize_key(key), None)

    @classmethod
    def is_registered(cls, key: K) -> bool:
        return cls.normalize_key(key) in cls._registry

    @classmethod
    def list_keys(cls) -> list[K]:
        return list(cls._registry.keys())

    @classmethod
    def create(cls, key: K, *args, **kwargs) -> T:
        return cls._registry[cls.normalize_key(key)](*args, **kwargs)
