from verbs.base import Verb, VerbState, VerbType
from verbs.factory import VerbFactory

GET = VerbType.GET
PUT = VerbType.PUT
POST = VerbType.POST
DELETE = VerbType.DELETE

__all__ = [
    "Verb",
    "VerbState",
    "VerbType",
    "VerbFactory",
    "GET",
    "PUT",
    "POST",
    "DELETE",
]
