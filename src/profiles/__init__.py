from profiles.fixtures import ClientFixture, JsonClientFixture, SoapClientFixture
from profiles.models import BehaviorProfile, profile_responder, status_responder

__all__ = [
    "BehaviorProfile",
    "ClientFixture",
    "JsonClientFixture",
    "SoapClientFixture",
    "profile_responder",
    "status_responder",
]
