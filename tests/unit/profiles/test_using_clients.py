"""
Behavior-profile assertions through the shared class-scoped fixtures.

"Without exception" and "status matches profile" are checked separately:
a fault-free send may still carry a non-success status code.
"""

import pytest

from profiles import BehaviorProfile
from verbs import VerbType


VERBS = [VerbType.GET, VerbType.PUT, VerbType.POST, VerbType.DELETE]


@pytest.fixture(params=["json_client_fixture", "soap_client_fixture"])
def client_fixture(request):
    return request.getfixturevalue(request.param)


@pytest.mark.unit
@pytest.mark.profiles
@pytest.mark.asyncio
class TestUsingClient:

    @pytest.mark.parametrize("verb", VERBS)
    async def test_should_send_without_exception(self, client_fixture, verb, target, payload):
        await client_fixture.ok_client.send_request(verb, target, payload)

    @pytest.mark.parametrize("verb", VERBS)
    async def test_should_send_successfully(self, client_fixture, verb, target, payload):
        response = await client_fixture.ok_client.send_request(verb, target, payload)

        assert response.is_success
        assert response.status_code == 200


@pytest.mark.unit
@pytest.mark.profiles
@pytest.mark.asyncio
class TestUsingUnauthorizedClient:

    @pytest.mark.parametrize("verb", VERBS)
    async def test_should_send_without_exception(self, client_fixture, verb, target, payload):
        await client_fixture.unauthorized_client.send_request(verb, target, payload)

    @pytest.mark.parametrize("verb", VERBS)
    async def test_should_be_unauthorized(self, client_fixture, verb, target, payload):
        response = await client_fixture.unauthorized_client.send_request(verb, target, payload)

        assert not response.is_success
        assert response.status_code == 401


@pytest.mark.unit
@pytest.mark.profiles
@pytest.mark.asyncio
class TestUsingForbiddenClient:

    @pytest.mark.parametrize("verb", VERBS)
    async def test_should_send_without_exception(self, client_fixture, verb, target, payload):
        await client_fixture.forbidden_client.send_request(verb, target, payload)

    @pytest.mark.parametrize("verb", VERBS)
    async def test_should_be_forbidden(self, client_fixture, verb, target, payload):
        response = await client_fixture.forbidden_client.send_request(verb, target, payload)

        assert not response.is_success
        assert response.status_code == 403

    async def test_get_index_with_empty_payload(self, json_client_fixture):
        response = await json_client_fixture.forbidden_client.send_request(
            VerbType.GET, "https://test/index.html", {}
        )

        assert response.status_code == 403


@pytest.mark.unit
@pytest.mark.profiles
@pytest.mark.asyncio
class TestUsingProxyRequiredClient:

    @pytest.mark.parametrize("verb", VERBS)
    async def test_should_send_without_exception(self, client_fixture, verb, target, payload):
        await client_fixture.proxy_required_client.send_request(verb, target, payload)

    @pytest.mark.parametrize("verb", VERBS)
    async def test_should_require_proxy(self, client_fixture, verb, target, payload):
        response = await client_fixture.proxy_required_client.send_request(verb, target, payload)

        assert not response.is_success
        assert response.status_code == 407

    async def test_post_index_with_payload(self, json_client_fixture):
        response = await json_client_fixture.proxy_required_client.send_request(
            VerbType.POST, "https://test/index.html", {"a": 1}
        )

        assert response.status_code == 407
        assert response.request.text == '{"a":1}'


@pytest.mark.unit
@pytest.mark.profiles
@pytest.mark.asyncio
class TestRepeatedSends:

    @pytest.mark.parametrize("profile", list(BehaviorProfile))
    async def test_same_status_every_time(self, client_fixture, profile, target):
        sender = client_fixture.client_for(profile)

        codes = {(await sender.send_request(VerbType.GET, target, {"n": i})).status_code for i in range(3)}

        assert codes == {profile.status_code}
