from __future__ import annotations
from functools import partial
from typing import Callable

from core.abstract_factory import TypeAbstractFactory
from core.exceptions import VerbConstructionError
from transport.base import TransportEngine
from verbs.base import Verb, VerbType


class VerbFactory(TypeAbstractFactory[str, Verb]):
    """
    Registry of verb constructors keyed by method token. Call sites select a
    verb by tag (``VerbType.PUT`` or ``"PUT"``) and the factory builds a fresh
    instance bound to the caller's transport.

    Every constructor must accept a single transport argument and return a
    Verb. Anything else is reported as a VerbConstructionError before the
    transport is touched.
    """

    @classmethod
    def normalize_key(cls, key: str | VerbType) -> str:
        if isinstance(key, VerbType):
            return key.value
        if not isinstance(key, str) or not key.strip():
            raise VerbConstructionError(key, "verb tags must be non-empty method tokens")
        return key.strip().upper()

    @classmethod
    def define(cls, method: str | VerbType) -> Callable[[TransportEngine], Verb]:
        """Register a verb by declaring only its method token."""
        token = cls.normalize_key(method)
        constructor = partial(Verb, method=token)
        cls.register_constructor(token, constructor)
        return constructor

    @classmethod
    def create(cls, key: str | VerbType, transport: TransportEngine) -> Verb:
        token = cls.normalize_key(key)

        if token not in cls._registry:
            raise VerbConstructionError(
                key, f"no verb registered for {token!r}; known verbs: {sorted(cls._registry)}"
            )

        try:
            verb = cls._registry[token](transport)
        except TypeError as exc:
            raise VerbConstructionError(key, f"constructor rejected (transport): {exc}") from exc

        if not isinstance(verb, Verb):
            raise VerbConstructionError(
                key, f"constructor returned {type(verb).__name__}, expected Verb"
            )

        return verb


for _verb in VerbType:
    VerbFactory.define(_verb)
