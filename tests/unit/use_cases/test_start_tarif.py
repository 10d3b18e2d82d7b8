"""Unit tests for StartTarif use case

Tests cover:
- Successful activation with charge and payday
- Missing service / tarif
- Domain rejections mapped to error codes
- Unexpected failures rolled back
"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.tarif.start_tarif import StartTarif
from src.app.use_cases.tarif.dtos import StartTarifCommandDTO


@pytest.fixture
def mock_service_repo():
    """Mock service repository"""
    repo = MagicMock()
    repo.update = AsyncMock()
    return repo


@pytest.fixture
def mock_tarif_repo():
    """Mock tarif repository"""
    return MagicMock()


@pytest.fixture
def start_use_case(mock_uow, mock_service_repo, mock_tarif_repo, policy, clock):
    """StartTarif use case instance with mocked dependencies"""
    return StartTarif(
        uow=mock_uow,
        service_repo=mock_service_repo,
        tarif_repo=mock_tarif_repo,
        policy=policy,
        clock=clock,
    )


@pytest.fixture
def command():
    return StartTarifCommandDTO(service_id=10, tarif_id=1)


@pytest.mark.asyncio
class TestStartTarifSuccess:

    async def test_start_tarif_charges_and_commits(
        self, start_use_case, mock_service_repo, mock_tarif_repo, mock_uow,
        command, make_service, basic_tarif
    ):
        """
        Given: Dormant service in group 1, user balance 100
        When: Tarif 1 (price 30) is started
        Then: Service updated, committed, response reports charge and new state
        """
        # Arrange
        service = make_service(payday=date(2024, 5, 10))
        mock_service_repo.get_by_id = AsyncMock(return_value=service)
        mock_tarif_repo.get_by_id = AsyncMock(return_value=basic_tarif)

        # Act
        result = await start_use_case.execute(command)

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.amount == Decimal("30")
        assert response.balance == Decimal("70")
        assert response.access_granted is True
        assert response.service.tarif_info.id == 1
        assert response.service.payday == date(2024, 6, 10)
        assert response.service.paid_for is True

        mock_service_repo.get_by_id.assert_called_once_with(10, for_update=True)
        mock_tarif_repo.get_by_id.assert_called_once_with(1)
        mock_service_repo.update.assert_called_once_with(service)
        mock_uow.commit.assert_called_once()
        mock_uow.rollback.assert_not_called()


@pytest.mark.asyncio
class TestStartTarifErrors:

    async def test_service_not_found(
        self, start_use_case, mock_service_repo, mock_tarif_repo, mock_uow, command
    ):
        mock_service_repo.get_by_id = AsyncMock(return_value=None)
        mock_tarif_repo.get_by_id = AsyncMock()

        result = await start_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "SERVICE_NOT_FOUND"
        mock_tarif_repo.get_by_id.assert_not_called()
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()

    async def test_tarif_not_found(
        self, start_use_case, mock_service_repo, mock_tarif_repo, mock_uow, command, make_service
    ):
        mock_service_repo.get_by_id = AsyncMock(return_value=make_service())
        mock_tarif_repo.get_by_id = AsyncMock(return_value=None)

        result = await start_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "TARIF_NOT_FOUND"
        assert "1" in result.error.message
        mock_uow.rollback.assert_called_once()

    async def test_already_active_is_rejected(
        self, start_use_case, mock_service_repo, mock_tarif_repo, mock_uow,
        command, make_service, basic_tarif, double_tarif, user
    ):
        service = make_service(tarif=double_tarif, payday=date(2024, 6, 1), paid_for=True)
        mock_service_repo.get_by_id = AsyncMock(return_value=service)
        mock_tarif_repo.get_by_id = AsyncMock(return_value=basic_tarif)

        result = await start_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "TARIF_ALREADY_ACTIVE"
        assert user.balance == Decimal("100")
        mock_service_repo.update.assert_not_called()
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()

    async def test_group_mismatch_is_rejected(
        self, start_use_case, mock_service_repo, mock_tarif_repo, mock_uow,
        command, make_service, foreign_group_tarif
    ):
        mock_service_repo.get_by_id = AsyncMock(return_value=make_service())
        mock_tarif_repo.get_by_id = AsyncMock(return_value=foreign_group_tarif)

        result = await start_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "TARIF_GROUP_MISMATCH"
        mock_uow.rollback.assert_called_once()

    async def test_unexpected_error_is_wrapped(
        self, start_use_case, mock_service_repo, mock_tarif_repo, mock_uow,
        command, make_service, basic_tarif
    ):
        mock_service_repo.get_by_id = AsyncMock(return_value=make_service())
        mock_tarif_repo.get_by_id = AsyncMock(return_value=basic_tarif)
        mock_uow.commit = AsyncMock(side_effect=RuntimeError("connection lost"))

        result = await start_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "START_TARIF_FAILED"
        assert result.error.reason == "connection lost"
        mock_uow.rollback.assert_called_once()
