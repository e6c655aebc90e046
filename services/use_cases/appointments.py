"""
Appointment use cases for business logic.

Every mutation goes storage first, memory second, statistics third. A
storage failure is logged and re-raised with memory left as it was.
"""
import logging
from typing import Any, Dict, Mapping, Union

from core.dto import CreateAppointmentDTO, UpdateAppointmentDTO, validate_dto
from core.entities import Appointment, AppointmentStatus, ClientType, NotificationType
from dashboard.messages import NotificationMessages
from services.statistics import safe_amount
from services.use_cases.base import BaseUseCase

logger = logging.getLogger(__name__)


def normalize_organization(current: Appointment, changes: Dict[str, Any]) -> Dict[str, Any]:
    """
    Keep organization_id consistent with the client type after the merge.

    Only organization clients carry an organization ID; an empty ID is
    stored as None, the same way creation does it.
    """
    client_type = changes.get("client_type", current.client_type)
    organization_id = changes.get("organization_id", current.organization_id)
    if client_type != ClientType.ORGANIZATION or not organization_id:
        organization_id = None
    if "organization_id" in changes or organization_id != current.organization_id:
        changes["organization_id"] = organization_id
    return changes


class CreateAppointmentUseCase(BaseUseCase[Appointment]):
    """
    Book a new appointment.
    """

    async def execute(
        self,
        draft: Union[CreateAppointmentDTO, Mapping[str, Any]]
    ) -> Appointment:
        """
        Validate, persist and register appointment.

        Args:
            draft: Raw appointment fields or a built DTO

        Returns:
            Created Appointment with storage-assigned ID

        Raises:
            ValidationError: If date or services are missing or malformed
        """
        data = validate_dto(CreateAppointmentDTO, draft)

        try:
            appointment = await self.state.appointments.add(data.to_record())
        except Exception as e:
            logger.error(f"Failed to create appointment: {e}", exc_info=True)
            raise

        self.state.recompute_statistics()

        logger.info(
            f"Appointment created for {appointment.date.isoformat()}",
            extra={"appointment_id": appointment.id, "status": appointment.status.value}
        )
        return appointment


class UpdateAppointmentUseCase(BaseUseCase[Appointment]):
    """
    Apply partial changes to an appointment, including status transitions.

    pending -> completed and pending -> cancelled are the normal moves;
    re-opening a completed or cancelled appointment is allowed.
    """

    async def execute(
        self,
        appointment_id: str,
        changes: Union[UpdateAppointmentDTO, Mapping[str, Any]]
    ) -> Appointment:
        """
        Update appointment.

        organization_id is re-derived from the merged client type. A
        completion notification that fails to store is logged; the update
        itself still succeeds.

        Args:
            appointment_id: Appointment ID
            changes: Fields to overwrite

        Returns:
            Appointment after the merge

        Raises:
            AppointmentNotFoundError: If appointment isn't loaded
            ValidationError: If changes are malformed
        """
        current = self.state.appointments.require(appointment_id)
        data = normalize_organization(
            current, validate_dto(UpdateAppointmentDTO, changes).to_changes()
        )

        try:
            updated = await self.state.appointments.update(appointment_id, data)
        except Exception as e:
            logger.error(
                f"Failed to update appointment: {e}",
                extra={"appointment_id": appointment_id},
                exc_info=True
            )
            raise

        was_completed = current.status == AppointmentStatus.COMPLETED
        is_completed = updated.status == AppointmentStatus.COMPLETED

        if was_completed or is_completed:
            self.state.recompute_statistics()

        if is_completed and not was_completed:
            # Appointment is already stored at this point
            try:
                await self.state.notifications.append(
                    title=NotificationMessages.APPOINTMENT_COMPLETED,
                    message=NotificationMessages.earnings_added(
                        safe_amount(updated.total_price, updated.id)
                    ),
                    type=NotificationType.SUCCESS,
                )
            except Exception as e:
                logger.error(
                    f"Failed to record completion notification: {e}",
                    extra={"appointment_id": appointment_id},
                    exc_info=True
                )

        if current.status != updated.status:
            logger.info(
                f"Appointment status {current.status.value} -> {updated.status.value}",
                extra={"appointment_id": appointment_id, "status": updated.status.value}
            )
        return updated


class DeleteAppointmentUseCase(BaseUseCase[str]):
    """
    Hard-delete an appointment.
    """

    async def execute(self, appointment_id: str) -> str:
        """
        Delete appointment.

        Returns:
            Deleted appointment ID

        Raises:
            AppointmentNotFoundError: If appointment isn't loaded
        """
        self.state.appointments.require(appointment_id)

        try:
            removed = await self.state.appointments.remove(appointment_id)
        except Exception as e:
            logger.error(
                f"Failed to delete appointment: {e}",
                extra={"appointment_id": appointment_id},
                exc_info=True
            )
            raise

        if removed.status == AppointmentStatus.COMPLETED:
            self.state.recompute_statistics()

        logger.info("Appointment deleted", extra={"appointment_id": appointment_id})
        return appointment_id
