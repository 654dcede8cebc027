"""Unit tests for SkillRequestService."""

from unittest.mock import MagicMock
from uuid import UUID

import pytest

from factories import (
    ALICE_ID,
    BOB_ID,
    BOB_PROFILE_ID,
    CAROL_ID,
    REQUEST_ID,
    list_execute,
    make_bob_profile,
    make_profile,
    make_request,
    no_rows_error,
    response,
    single_execute,
)
from skillswap.api.middleware.error_handler import (
    AuthorizationError,
    NotFoundError,
    ProfileRequiredError,
    RequestConflictError,
    ValidationError,
)
from skillswap.models.skill_request import SkillRequestCreate as SkillRequestInsert
from skillswap.models.skill_request import SkillRequestStatus
from skillswap.schemas.auth import UserContext
from skillswap.schemas.skill_request import SkillRequestCreate
from skillswap.services.skill_request_service import SkillRequestService

ALICE = UserContext(user_id=UUID(ALICE_ID), email="alice@example.com", name="Alice")
BOB = UserContext(user_id=UUID(BOB_ID), email="bob@example.com", name="Bob")
CAROL = UserContext(user_id=UUID(CAROL_ID), email="carol@example.com", name="Carol")


def request_form(**overrides: str) -> SkillRequestCreate:
    values = {
        "to_profile_id": BOB_PROFILE_ID,
        "skill_offered": "React",
        "skill_wanted": "Cooking",
        "message": "Hi Bob, want to swap React for cooking?",
    }
    values.update(overrides)
    return SkillRequestCreate(**values)


@pytest.fixture
def service(mock_supabase_client: MagicMock) -> SkillRequestService:
    """Create SkillRequestService with mocked client."""
    return SkillRequestService()


def update_execute(table: MagicMock) -> MagicMock:
    return table.update.return_value.eq.return_value.eq.return_value.execute


class TestSendRequest:
    """Tests for send_request method."""

    @pytest.mark.asyncio
    async def test_creates_pending_request(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        single_execute(mock_tables["profiles"]).side_effect = [
            response(make_profile()),
            response(make_bob_profile()),
        ]
        requests_table = mock_tables["skill_requests"]
        requests_table.insert.return_value.execute.return_value = response([make_request()])

        result = await service.send_request(ALICE, request_form())

        assert result["id"] == REQUEST_ID
        inserted = requests_table.insert.call_args[0][0]
        assert inserted["from_user_id"] == ALICE_ID
        assert inserted["to_user_id"] == BOB_ID
        assert inserted["status"] == "pending"
        assert inserted["skill_offered"] == "React"
        assert inserted["skill_wanted"] == "Cooking"
        assert set(inserted) == set(SkillRequestInsert.__annotations__)

    @pytest.mark.asyncio
    async def test_empty_message_is_rejected_before_any_query(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        with pytest.raises(ValidationError) as exc_info:
            await service.send_request(ALICE, request_form(message="   "))

        assert exc_info.value.message == "Please fill in all fields"
        assert exc_info.value.details[0]["loc"] == ["message"]
        mock_tables["profiles"].select.assert_not_called()
        mock_tables["skill_requests"].insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_sender_without_profile(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        single_execute(mock_tables["profiles"]).side_effect = no_rows_error()

        with pytest.raises(ProfileRequiredError):
            await service.send_request(ALICE, request_form())

        mock_tables["skill_requests"].insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_private_receiver_looks_missing(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        single_execute(mock_tables["profiles"]).side_effect = [
            response(make_profile()),
            response(make_bob_profile(is_public=False)),
        ]

        with pytest.raises(NotFoundError):
            await service.send_request(ALICE, request_form())

    @pytest.mark.asyncio
    async def test_cannot_request_self(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        single_execute(mock_tables["profiles"]).side_effect = [
            response(make_profile()),
            response(make_profile()),
        ]

        with pytest.raises(ValidationError) as exc_info:
            await service.send_request(ALICE, request_form(skill_wanted="React"))

        assert "yourself" in exc_info.value.message
        mock_tables["skill_requests"].insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_offered_skill_must_be_on_sender_profile(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        single_execute(mock_tables["profiles"]).side_effect = [
            response(make_profile()),
            response(make_bob_profile()),
        ]

        with pytest.raises(ValidationError):
            await service.send_request(ALICE, request_form(skill_offered="Guitar"))

    @pytest.mark.asyncio
    async def test_wanted_skill_must_be_offered_by_receiver(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        single_execute(mock_tables["profiles"]).side_effect = [
            response(make_profile()),
            response(make_bob_profile()),
        ]

        with pytest.raises(ValidationError) as exc_info:
            await service.send_request(ALICE, request_form(skill_wanted="Painting"))

        assert "Bob" in exc_info.value.message


class TestGetRequest:
    """Tests for get_request method."""

    @pytest.mark.asyncio
    async def test_visible_to_both_parties(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        single_execute(mock_tables["skill_requests"]).return_value = response(make_request())

        assert (await service.get_request(ALICE, UUID(REQUEST_ID)))["id"] == REQUEST_ID
        assert (await service.get_request(BOB, UUID(REQUEST_ID)))["id"] == REQUEST_ID

    @pytest.mark.asyncio
    async def test_hidden_from_third_party(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        single_execute(mock_tables["skill_requests"]).return_value = response(make_request())

        with pytest.raises(NotFoundError):
            await service.get_request(CAROL, UUID(REQUEST_ID))


class TestRespondToRequest:
    """Tests for respond_to_request method."""

    @pytest.mark.asyncio
    async def test_receiver_accepts_pending_request(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        table = mock_tables["skill_requests"]
        single_execute(table).return_value = response(make_request())
        update_execute(table).return_value = response([make_request(status="accepted")])

        result = await service.respond_to_request(BOB, UUID(REQUEST_ID), SkillRequestStatus.ACCEPTED)

        assert result["status"] == "accepted"
        update_data = table.update.call_args[0][0]
        assert update_data["status"] == "accepted"
        assert "updated_at" in update_data

    @pytest.mark.asyncio
    async def test_receiver_declines_pending_request(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        table = mock_tables["skill_requests"]
        single_execute(table).return_value = response(make_request())
        update_execute(table).return_value = response([make_request(status="declined")])

        result = await service.respond_to_request(BOB, UUID(REQUEST_ID), SkillRequestStatus.DECLINED)

        assert result["status"] == "declined"

    @pytest.mark.asyncio
    async def test_sender_cannot_respond(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        table = mock_tables["skill_requests"]
        single_execute(table).return_value = response(make_request())

        with pytest.raises(AuthorizationError) as exc_info:
            await service.respond_to_request(ALICE, UUID(REQUEST_ID), SkillRequestStatus.ACCEPTED)

        assert exc_info.value.status_code == 403
        table.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_completed_is_not_a_decision(self, service: SkillRequestService) -> None:
        with pytest.raises(ValidationError):
            await service.respond_to_request(BOB, UUID(REQUEST_ID), SkillRequestStatus.COMPLETED)

    @pytest.mark.asyncio
    async def test_guarded_declined_request_cannot_be_accepted(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        service.settings = service.settings.model_copy(update={"request_transition_guard": True})
        table = mock_tables["skill_requests"]
        single_execute(table).return_value = response(make_request(status="declined"))

        with pytest.raises(RequestConflictError) as exc_info:
            await service.respond_to_request(BOB, UUID(REQUEST_ID), SkillRequestStatus.ACCEPTED)

        assert exc_info.value.status_code == 409
        assert exc_info.value.message == "Request has already been declined"
        table.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_declined_request_is_overwritten_by_default(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        """Without the guard the last response wins."""
        assert service.settings.request_transition_guard is False
        table = mock_tables["skill_requests"]
        single_execute(table).return_value = response(make_request(status="declined"))
        update_execute(table).return_value = response([make_request(status="accepted")])

        result = await service.respond_to_request(BOB, UUID(REQUEST_ID), SkillRequestStatus.ACCEPTED)

        assert result["status"] == "accepted"
        table.update.assert_called_once()


class TestListRequests:
    """Tests for list_incoming and list_sent."""

    @pytest.mark.asyncio
    async def test_incoming_filters_by_receiver(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        table = mock_tables["skill_requests"]
        sender = {k: make_profile()[k] for k in ("id", "user_id", "name", "avatar_url", "location", "is_public")}
        list_execute(table).return_value = response([make_request(from_profile=sender)])

        result = await service.list_incoming(BOB)

        assert result[0]["from_profile"]["name"] == "Alice"
        table.select.return_value.eq.assert_called_with("to_user_id", BOB_ID)
        table.select.return_value.eq.return_value.order.assert_called_with("created_at", desc=True)

    @pytest.mark.asyncio
    async def test_sent_hides_private_receiver(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        table = mock_tables["skill_requests"]
        receiver = {
            "id": BOB_PROFILE_ID,
            "user_id": BOB_ID,
            "name": "Bob",
            "avatar_url": None,
            "location": "Lyon",
            "is_public": False,
        }
        list_execute(table).return_value = response([make_request(to_profile=receiver)])

        result = await service.list_sent(ALICE)

        assert result[0]["to_profile"] is None
        table.select.return_value.eq.assert_called_with("from_user_id", ALICE_ID)

    @pytest.mark.asyncio
    async def test_empty_lists(
        self, service: SkillRequestService, mock_tables: dict[str, MagicMock]
    ) -> None:
        list_execute(mock_tables["skill_requests"]).return_value = response(None)

        assert await service.list_incoming(ALICE) == []
