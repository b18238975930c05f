from __future__ import annotations
import logging
from abc import ABC
from types import MappingProxyType
from typing import ClassVar, Generic, Mapping, TypeVar

from clients.base import MessageSender
from clients.json_client import JsonClient
from clients.soap_client import SoapClient
from profiles.models import BehaviorProfile, profile_responder
from transport.mock import MockTransport


S = TypeVar("S", bound=MessageSender)


class ClientFixture(ABC, Generic[S]):
    """
    Owns one MockTransport and one message sender per behavior profile.

    Everything is arranged eagerly on construction and at most once, so a
    single fixture instance can be shared by every test in a class. The
    transports and senders are exposed through read-only mappings; tests must
    not rebind a profile after arrangement.
    """

    sender_type: ClassVar[type[MessageSender]]

    def __init__(self) -> None:
        self._transports: Mapping[BehaviorProfile, MockTransport] = MappingProxyType({})
        self._senders: Mapping[BehaviorProfile, S] = MappingProxyType({})
        self._arranged = False
        self._logger = logging.getLogger(f"[{self.__class__.__name__}]")
        self.arrange()

    def arrange(self) -> None:
        if self._arranged:
            return

        transports = {profile: MockTransport(profile_responder(profile)) for profile in BehaviorProfile}
        senders = {profile: self.sender_type(transport) for profile, transport in transports.items()}

        self._transports = MappingProxyType(transports)
        self._senders = MappingProxyType(senders)
        self._arranged = True

        self._logger.debug(
            f"Arranged {self.sender_type.__name__} senders for {[p.value for p in BehaviorProfile]}"
        )

    @property
    def arranged(self) -> bool:
        return self._arranged

    @property
    def transports(self) -> Mapping[BehaviorProfile, MockTransport]:
        return self._transports

    @property
    def senders(self) -> Mapping[BehaviorProfile, S]:
        return self._senders

    def transport_for(self, profile: BehaviorProfile | str) -> MockTransport:
        return self._transports[BehaviorProfile(profile)]

    def client_for(self, profile: BehaviorProfile | str) -> S:
        return self._senders[BehaviorProfile(profile)]

    @property
    def ok_client(self) -> S:
        return self.client_for(BehaviorProfile.SUCCESS)

    @property
    def unauthorized_client(self) -> S:
        return self.client_for(BehaviorProfile.UNAUTHORIZED)

    @property
    def forbidden_client(self) -> S:
        return self.client_for(BehaviorProfile.FORBIDDEN)

    @property
    def proxy_required_client(self) -> S:
        return self.client_for(BehaviorProfile.PROXY_REQUIRED)


class JsonClientFixture(ClientFixture[JsonClient]):
    sender_type = JsonClient


class SoapClientFixture(ClientFixture[SoapClient]):
    sender_type = SoapClient
